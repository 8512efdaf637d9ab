"""
MongoDB document serialization utilities
"""
from typing import Dict, Any, List, Optional
from bson import ObjectId


def serialize_doc(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Convert a product or review document into plain data

    Every ObjectId, including the ids of embedded reviews, becomes its hex string.

    Args:
        doc: MongoDB document dictionary

    Returns:
        Serialized copy of the document, or None if input is None
    """
    if doc is None:
        return None
    return convert_object_ids(doc)


def serialize_docs(docs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Serialize a list of MongoDB documents

    Args:
        docs: List of MongoDB document dictionaries

    Returns:
        List of serialized documents
    """
    return [serialize_doc(doc) for doc in docs if doc is not None]


def convert_object_ids(doc: Any) -> Any:
    """
    Recursively convert ObjectId instances to strings in a document

    Args:
        doc: Document that may contain ObjectIds at any level

    Returns:
        New document with all ObjectIds converted to strings
    """
    if isinstance(doc, dict):
        return {key: convert_object_ids(value) for key, value in doc.items()}
    elif isinstance(doc, list):
        return [convert_object_ids(item) for item in doc]
    elif isinstance(doc, ObjectId):
        return str(doc)
    else:
        return doc
