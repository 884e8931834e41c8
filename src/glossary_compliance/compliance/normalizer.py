"""
Nettoyage du texte extrait de formats balisés (segments TMX).

Les segments de mémoire de traduction contiennent souvent des balises en
ligne (<bpt>, <ph>, <b>...), des puces et des points de suspension hérités
du document d'origine. Ce module produit un texte brut comparable.

Pipeline, appliqué dans cet ordre :
1. Suppression des balises <...>
2. Tabulations → espace
3. Suppression des puces "• "
4. Suppression d'un "-" initial
5. Suppression d'un "■" initial
6. Guillemet initial doublé ('"' → '""')
7. Suites de "." réduites à un seul "."
8. Trim
"""

import re

MARKUP_TAG_PATTERN = re.compile(r"<[^>]*>")
DOT_RUN_PATTERN = re.compile(r"\.+")
BULLET_MARKER = "• "
LEADING_DASH = "-"
LEADING_SQUARE = "■"
QUOTE = '"'


def normalize_markup_text(text: str) -> str:
    """
    Produit un texte comparable depuis un segment contenant du balisage.

    Args:
        text: Contenu brut du segment

    Returns:
        Texte nettoyé (éventuellement vide)

    Example:
        >>> normalize_markup_text("<b>• -Item one..</b>")
        'Item one.'
    """
    text = MARKUP_TAG_PATTERN.sub("", text)
    text = text.replace("\t", " ")
    text = text.replace(BULLET_MARKER, "")
    if text.startswith(LEADING_DASH):
        text = text[1:]
    if text.startswith(LEADING_SQUARE):
        text = text[1:]
    # Doublement conservé tel quel : les rapports existants en dépendent
    if text.startswith(QUOTE):
        text = QUOTE + text
    text = DOT_RUN_PATTERN.sub(".", text)
    return text.strip()
