import json
from xml.parsers.expat import ExpatError

import pytest

from flow_risk_analyzer.core.services import XmlConverter


def test_nested_elements_become_mappings():
    structure = XmlConverter.to_structure("<Flow><label>Demo</label><status>Active</status></Flow>")
    assert structure == {"Flow": {"label": "Demo", "status": "Active"}}


def test_repeated_elements_become_lists_in_document_order():
    xml = "<Flow><decisions><name>A</name></decisions><decisions><name>B</name></decisions></Flow>"
    structure = XmlConverter.to_structure(xml)
    assert [d["name"] for d in structure["Flow"]["decisions"]] == ["A", "B"]


def test_attributes_are_kept():
    structure = XmlConverter.to_structure('<Flow xmlns="urn:meta"><label lang="en">Demo</label></Flow>')
    assert structure["Flow"]["@xmlns"] == "urn:meta"
    assert structure["Flow"]["label"] == {"@lang": "en", "#text": "Demo"}


def test_json_text_is_pretty_printed_in_parser_order():
    text = XmlConverter().to_json_text("<Flow><status>Draft</status><label>Ünïcode</label></Flow>")

    assert text == json.dumps({"Flow": {"status": "Draft", "label": "Ünïcode"}}, indent=2, ensure_ascii=False)
    assert list(json.loads(text)["Flow"]) == ["status", "label"]


def test_malformed_xml_propagates():
    with pytest.raises(ExpatError):
        XmlConverter().to_json_text("<Flow><label></Flow>")
