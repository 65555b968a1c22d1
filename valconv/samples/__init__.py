"""Runnable value conversion samples."""

from .runner import (
    SampleAssertionError,
    mapping_immutable_class_property,
    mapping_immutable_struct_property,
    mapping_list_property,
    run_samples,
    main,
)

__all__ = [
    "SampleAssertionError",
    "mapping_immutable_class_property",
    "mapping_immutable_struct_property",
    "mapping_list_property",
    "run_samples",
    "main",
]
