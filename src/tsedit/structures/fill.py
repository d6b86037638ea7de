"""
Structure fill engine.

fill_node() validates a structure against the node's structure model and
hands it to the node's trait stack. Each trait applies only the fields it
owns that are present, after the traits it builds on have applied theirs.
Setters compare against the current state first, so filling the same
structure twice issues no edits the second time.
"""

from typing import Any, Dict, Union

from pydantic import BaseModel, ValidationError

from tsedit.exceptions import ArgumentError, InvalidOperationError
from tsedit.logging_config import get_logger
from .models import Structure

logger = get_logger("structures")


def coerce_structure(node: Any, structure: Union[BaseModel, Dict[str, Any]]) -> Structure:
    """
    Convert a structure model or dict to the node's structure model.

    Only the fields that were set on the input are carried over.

    Raises:
        InvalidOperationError: If the node kind cannot be filled
        ArgumentError: If the structure has unknown fields or bad values
    """
    model = node._structure_class
    if model is None:
        raise InvalidOperationError(f"{type(node).__name__} nodes do not support structures.")
    if isinstance(structure, model):
        return structure

    if isinstance(structure, BaseModel):
        data = structure.model_dump(exclude_unset=True)
    elif isinstance(structure, dict):
        data = structure
    else:
        raise ArgumentError("structure", f"Expected a structure model or dict, got {type(structure).__name__}")

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ArgumentError("structure", str(e)) from e


def fill_node(node: Any, structure: Union[BaseModel, Dict[str, Any]]):
    """
    Apply the present fields of a structure to a node.

    Returns:
        The node, for chaining
    """
    structure = coerce_structure(node, structure)
    source_file = node.get_source_file()
    edits_before = len(source_file._ledger)

    node._fill(structure)

    edits = len(source_file._ledger) - edits_before
    logger.debug(
        f"Filled {type(node).__name__} with {sorted(structure.model_fields_set)} ({edits} edit(s))"
    )
    return node


def get_node_structure(node: Any) -> Structure:
    """Build the structure describing a node's current state."""
    model = node._structure_class
    if model is None:
        raise InvalidOperationError(f"{type(node).__name__} nodes do not support structures.")
    data: Dict[str, Any] = {}
    node._collect_structure(data)
    return model.model_validate(data)
