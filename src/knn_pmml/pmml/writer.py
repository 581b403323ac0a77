from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from knn_pmml import __version__
from knn_pmml.encoder.measures import Minkowski
from knn_pmml.encoder.model import NearestNeighborModel

PMML_VERSION = "4.3"
PMML_NAMESPACE = "http://www.dmg.org/PMML-4_3"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# InlineTable cells are elements named after their column
_ELEMENT_NAME = re.compile(r"^[^\W\d][\w.\-]*$")

ET.register_namespace("", PMML_NAMESPACE)


class PMMLWriteError(ValueError):
    """Model cannot be expressed as a PMML document."""


@dataclass(frozen=True)
class Header:
    application_name: str = "knn-pmml"
    application_version: str = __version__
    description: str | None = None


def _tag(name: str) -> str:
    return f"{{{PMML_NAMESPACE}}}{name}"


def _sub(parent: ET.Element, tag: str, /, **attrib: str) -> ET.Element:
    return ET.SubElement(parent, _tag(tag), attrib)


def _check_column_key(key: str) -> str:
    if not _ELEMENT_NAME.match(key) or key.lower().startswith("xml"):
        raise PMMLWriteError(f"column '{key}' is not a valid XML element name")
    return key


def _header(parent: ET.Element, header: Header) -> None:
    attrib = {} if header.description is None else {"description": header.description}
    node = _sub(parent, "Header", **attrib)
    _sub(node, "Application", name=header.application_name, version=header.application_version)


def _data_dictionary(parent: ET.Element, model: NearestNeighborModel) -> None:
    fields: list[tuple[str, str]] = []
    if model.target_field is not None:
        fields.append((model.target_field, model.target_data_type))
    fields.extend((name, model.feature_data_type) for name in model.active_fields)

    node = _sub(parent, "DataDictionary", numberOfFields=str(len(fields)))
    for name, data_type in fields:
        _sub(node, "DataField", name=name, optype="continuous", dataType=data_type)


def _mining_schema(parent: ET.Element, model: NearestNeighborModel) -> None:
    node = _sub(parent, "MiningSchema")
    if model.target_field is not None:
        _sub(node, "MiningField", name=model.target_field, usageType="target")
    for name in model.active_fields:
        _sub(node, "MiningField", name=name)


def _training_instances(parent: ET.Element, model: NearestNeighborModel) -> None:
    table = model.training_instances
    node = _sub(parent, "TrainingInstances", isTransformed=str(model.is_transformed).lower())
    instance_fields = _sub(node, "InstanceFields")
    for field_name, column in model.instance_fields.items():
        _sub(instance_fields, "InstanceField", field=field_name, column=_check_column_key(column))

    inline_table = _sub(node, "InlineTable")
    for row in table:
        row_node = _sub(inline_table, "row")
        for key in table.column_keys:
            cell = _sub(row_node, key)
            cell.text = row[key]


def _comparison_measure(parent: ET.Element, model: NearestNeighborModel) -> None:
    comparison = model.comparison_measure
    node = _sub(
        parent,
        "ComparisonMeasure",
        kind=comparison.kind.value,
        compareFunction=comparison.compare_function.value,
    )
    measure = comparison.measure
    if isinstance(measure, Minkowski):
        _sub(node, measure.element, **{"p-parameter": str(measure.p_parameter)})
    else:
        _sub(node, measure.element)


def build_pmml(model: NearestNeighborModel, *, header: Header | None = None) -> ET.Element:
    root = ET.Element(_tag("PMML"), {"version": PMML_VERSION})
    _header(root, header or Header())
    _data_dictionary(root, model)

    knn = _sub(
        root,
        "NearestNeighborModel",
        functionName=model.function_name.value,
        numberOfNeighbors=str(model.number_of_neighbors),
        continuousScoringMethod=model.continuous_scoring_method.value,
    )
    _mining_schema(knn, model)
    _training_instances(knn, model)
    _comparison_measure(knn, model)
    inputs = _sub(knn, "KNNInputs")
    for name in model.active_fields:
        _sub(inputs, "KNNInput", field=name)
    return root


def to_pmml_string(model: NearestNeighborModel, *, header: Header | None = None) -> str:
    root = build_pmml(model, header=header)
    ET.indent(root)
    return XML_DECLARATION + ET.tostring(root, encoding="unicode")


def write_pmml(path: str | Path, model: NearestNeighborModel, *, header: Header | None = None) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(to_pmml_string(model, header=header), encoding="utf-8")
    return out_path
