"""Public contracts for head snippet emitters."""
from celine.htmlhead.contracts.sink import (
    AttrValue,
    Doctype,
    Element,
    MetadataPhrasingSink,
    ScriptSupportingSink,
    Serialization,
)

__all__ = [
    "AttrValue",
    "Doctype",
    "Element",
    "MetadataPhrasingSink",
    "ScriptSupportingSink",
    "Serialization",
]
