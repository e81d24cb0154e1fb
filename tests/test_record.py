"""Tests for data-driven component records."""

import pytest

from copper_substrate.board import GraphicCircle, GraphicLine, GraphicRectangle
from copper_substrate.components import RecordComponent
from copper_substrate.core import (
    FpTextType,
    FunctionalKind,
    LayerType,
    PadShape,
    PadType,
    Rectangle,
    StrokeType,
    TentingType,
)
from copper_substrate.exceptions import ComponentError

RESISTOR_YAML = """
name: R_0805_2012Metric
library: Resistor_SMD
functional_type: {kind: resistor, part: 10k}
bounding_box: [-1.0, -0.625, 1.0, 0.625]
description: Resistor SMD 0805
tags: [resistor, "0805"]
pads:
  - {number: "1", type: smd, shape: roundrect, at: [-0.95, 0], size: [1.0, 1.45],
     layers: [F.Cu, F.Mask, F.Paste], roundrect_ratio: 0.25, uuid: pad-1}
  - {number: "2", type: smd, shape: roundrect, at: [0.95, 0], size: [1.0, 1.45],
     layers: [F.Cu, F.Mask, F.Paste], roundrect_ratio: 0.25, uuid: pad-2}
texts:
  - {type: reference, text: "REF**", at: [0, -1.16], layer: F.SilkS, uuid: text-ref}
  - {type: value, text: R_0805_2012Metric, at: [0, 1.16], layer: F.Fab, rotation: 180,
     font: {size: [0.8, 0.8], thickness: 0.12}, uuid: text-value}
graphics:
  - {kind: line, layer: F.Fab, start: [-1, -0.625], end: [1, -0.625],
     stroke: {width: 0.1, type: dash}, uuid: fab-1}
  - {kind: rectangle, layer: F.SilkS, bounds: [-1, -0.625, 1, 0.625], uuid: silk-1}
  - {kind: circle, layer: F.SilkS, center: [0, 0], radius: 0.2, uuid: silk-2}
model:
  path: ${KICAD9_3DMODEL_DIR}/Resistor_SMD.3dshapes/R_0805_2012Metric.wrl
  rotation: [0, 0, 90]
"""


class TestFromYaml:
    """Loading records from YAML text."""

    @pytest.fixture
    def record(self):
        return RecordComponent.from_yaml(RESISTOR_YAML)

    def test_identity(self, record):
        assert record.footprint_name() == "R_0805_2012Metric"
        assert record.library_name() == "Resistor_SMD"
        assert record.functional_type().kind is FunctionalKind.RESISTOR
        assert record.functional_type().part == "10k"
        assert record.description() == "Resistor SMD 0805"
        assert record.tags() == "resistor 0805"

    def test_classification_is_derived(self, record):
        assert record.is_smt()
        assert record.is_passive()
        assert record.is_electrical()
        assert record.terminal_count() == 2

    def test_pads(self, record):
        pads = record.pad_descriptors()
        assert [p.uuid for p in pads] == ["pad-1", "pad-2"]
        assert pads[0].pad_type is PadType.SMD
        assert pads[0].shape is PadShape.ROUNDRECT
        assert pads[0].position == (-0.95, 0.0)
        assert pads[0].layers == ("F.Cu", "F.Mask", "F.Paste")
        assert pads[0].roundrect_ratio == 0.25
        assert pads[0].tenting.front is TentingType.NONE

    def test_texts(self, record):
        ref, value = record.fp_text_elements()
        assert ref.text_type is FpTextType.REFERENCE
        assert ref.rotation is None
        assert value.rotation == 180.0
        assert value.font.size == (0.8, 0.8)
        assert value.font.thickness == 0.12

    def test_graphics(self, record):
        line, rect, circle = record.graphic_elements()
        assert isinstance(line, GraphicLine)
        assert line.layer is LayerType.FABRICATION
        assert line.stroke.stroke_type is StrokeType.DASHED
        assert isinstance(rect, GraphicRectangle)
        assert rect.bounds == Rectangle(-1, -0.625, 1, 0.625)
        assert isinstance(circle, GraphicCircle)
        assert circle.radius == 0.2

    def test_model(self, record):
        model = record.model_3d()
        assert model.path.endswith("R_0805_2012Metric.wrl")
        assert model.rotation == (0.0, 0.0, 90.0)
        assert model.scale == (1.0, 1.0, 1.0)

    def test_export(self, record):
        text = record.to_kicad_footprint()
        assert "(type dash)" in text
        assert '(fp_text value "R_0805_2012Metric" (at 0 1.16 180) (layer "F.Fab")' in text
        assert "(xyz 0 0 90)" in text
        # One declared line plus the courtyard, rectangle and circle skipped
        assert text.count("(fp_line") == 5

    def test_export_is_repeatable(self):
        a = RecordComponent.from_yaml(RESISTOR_YAML)
        b = RecordComponent.from_yaml(RESISTOR_YAML)
        assert a.to_kicad_footprint() == b.to_kicad_footprint()


class TestFromDict:
    """Defaults and error reporting."""

    def test_minimal_record(self):
        record = RecordComponent.from_dict({"name": "MH", "bounding_box": [0, 0, 3, 3]})
        assert record.pad_descriptors() == []
        assert record.description() is None
        assert record.tags() is None
        assert record.model_3d() is None
        assert record.courtyard_margin() == 0.25
        assert record.functional_type().kind is FunctionalKind.INTEGRATED_CIRCUIT
        assert not record.is_smt()

    def test_functional_type_as_string(self):
        record = RecordComponent.from_dict(
            {"name": "U1", "bounding_box": [0, 0, 1, 1], "functional_type": "fpga"}
        )
        assert record.functional_type().kind is FunctionalKind.FPGA

    def test_generated_tokens_when_missing(self):
        pad = {"number": "1", "size": [1, 1]}
        record = RecordComponent.from_dict(
            {"name": "X", "bounding_box": [0, 0, 1, 1], "pads": [pad, pad]}
        )
        first, second = record.pad_descriptors()
        assert first.uuid and second.uuid
        assert first.uuid != second.uuid

    def test_npth_pads_not_counted_as_terminals(self):
        record = RecordComponent.from_dict(
            {
                "name": "J1",
                "bounding_box": [0, 0, 5, 5],
                "pads": [
                    {"number": "1", "type": "thru_hole", "size": [1.7, 1.7], "drill": 1.0},
                    {"number": "1", "type": "thru_hole", "size": [1.7, 1.7], "drill": 1.0},
                    {"number": "2", "type": "thru_hole", "size": [1.7, 1.7], "drill": 1.0},
                    {"number": "", "type": "np_thru_hole", "size": [3, 3], "drill": 3},
                ],
            }
        )
        assert record.terminal_count() == 2
        assert not record.is_smt()

    def test_unknown_keys_logged(self, caplog):
        """Unknown top-level keys are ignored with a warning."""
        with caplog.at_level("WARNING", logger="copper_substrate.components.record"):
            record = RecordComponent.from_dict(
                {"name": "X", "bounding_box": [0, 0, 1, 1], "footprint_ref": "R1"}
            )
        assert record.footprint_name() == "X"
        assert "Ignoring unknown key 'footprint_ref' in component record X" in caplog.text

    def test_null_nested_sections_use_defaults(self):
        """Explicit nulls for tenting, font and stroke fall back to defaults."""
        record = RecordComponent.from_yaml(
            """
name: X
bounding_box: [0, 0, 1, 1]
pads:
  - {number: "1", size: [1, 1], tenting: null}
texts:
  - {text: note, font: null}
graphics:
  - {kind: line, start: [0, 0], end: [1, 0], stroke: null}
"""
        )
        assert record.pad_descriptors()[0].tenting.front is TentingType.NONE
        assert record.fp_text_elements()[0].font.thickness == 0.15
        assert record.graphic_elements()[0].stroke.width == 0.12

    @pytest.mark.parametrize("section", ["tenting", "font", "stroke"])
    def test_non_mapping_nested_section(self, section):
        """A scalar where a mapping is expected is a ComponentError."""
        data = {"name": "X", "bounding_box": [0, 0, 1, 1]}
        if section == "tenting":
            data["pads"] = [{"number": "1", "size": [1, 1], "tenting": "full"}]
        elif section == "font":
            data["texts"] = [{"text": "note", "font": 1.0}]
        else:
            data["graphics"] = [{"start": [0, 0], "end": [1, 0], "stroke": "dash"}]
        with pytest.raises(ComponentError, match="Invalid component record"):
            RecordComponent.from_dict(data)

    def test_numeric_description_and_tags_are_strings(self):
        """YAML numbers in description and tags are written as quoted strings."""
        record = RecordComponent.from_yaml(
            "name: X\nbounding_box: [0, 0, 1, 1]\ndescription: 1206\ntags: 0.5\n"
        )
        assert record.description() == "1206"
        assert record.tags() == "0.5"
        text = record.to_kicad_footprint()
        assert '\t(descr "1206")\n' in text
        assert '\t(tags "0.5")\n' in text

    def test_missing_required_key(self):
        with pytest.raises(ComponentError, match="missing required key 'bounding_box'"):
            RecordComponent.from_dict({"name": "X"})

    def test_unknown_pad_type(self):
        pad = {"number": "1", "type": "smt", "size": [1, 1]}
        data = {"name": "X", "bounding_box": [0, 0, 1, 1], "pads": [pad]}
        with pytest.raises(ComponentError, match="Unknown PadType keyword"):
            RecordComponent.from_dict(data)

    def test_unknown_graphic_kind(self):
        data = {"name": "X", "bounding_box": [0, 0, 1, 1], "graphics": [{"kind": "arc"}]}
        with pytest.raises(ComponentError, match="unknown graphic kind 'arc'"):
            RecordComponent.from_dict(data)

    def test_wrong_coordinate_count(self):
        with pytest.raises(ComponentError, match="expected 4 numbers, got 3"):
            RecordComponent.from_dict({"name": "X", "bounding_box": [0, 0, 1]})

    def test_not_a_mapping(self):
        with pytest.raises(ComponentError, match="must be a mapping"):
            RecordComponent.from_dict(["name", "X"])

    def test_invalid_yaml(self):
        with pytest.raises(ComponentError, match="Invalid YAML"):
            RecordComponent.from_yaml("name: [unclosed")
