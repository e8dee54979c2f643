"""
ENML (Evernote Markup Language) envelope helpers.

Content is concatenated into the envelope verbatim. No escaping or
sanitization is applied, so callers passing plain text containing ``<`` or
``&`` produce a document that is not well-formed XML.
"""

ENML_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE en-note SYSTEM "http://xml.evernote.com/pub/enml2.dtd">\n'
    "<en-note>"
)
ENML_FOOTER = "</en-note>"


def wrap_enml(content: str) -> str:
    """Wrap raw HTML/text in the ENML document envelope."""
    return f"{ENML_HEADER}{content}{ENML_FOOTER}"


def unwrap_enml(document: str) -> str:
    """
    Extract the inner content of a document produced by ``wrap_enml``.

    Extraction is positional: the fixed header and footer are sliced off.

    Raises:
        ValueError: If the document does not carry the envelope
    """
    if not (document.startswith(ENML_HEADER) and document.endswith(ENML_FOOTER)):
        raise ValueError("Document is not an ENML envelope")
    return document[len(ENML_HEADER) : len(document) - len(ENML_FOOTER)]
