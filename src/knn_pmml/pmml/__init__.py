"""PMML serialization of encoded nearest neighbor models."""

from knn_pmml.pmml.writer import (
    PMML_NAMESPACE,
    PMML_VERSION,
    Header,
    PMMLWriteError,
    build_pmml,
    to_pmml_string,
    write_pmml,
)

__all__ = [
    "PMML_NAMESPACE",
    "PMML_VERSION",
    "Header",
    "PMMLWriteError",
    "build_pmml",
    "to_pmml_string",
    "write_pmml",
]
