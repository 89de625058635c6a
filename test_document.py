"""
Test Straps Document Model
==========================

Parsing of straps.xml into environments and settings.
"""

import io

import pytest

from conftest import SAMPLE_STRAPS
from straps import (
    Document,
    Environment,
    MalformedDocumentError,
    Setting,
    StrapsFileNotFoundError,
    parse_document,
)


def parse_text(text: str) -> Document:
    return parse_document(io.BytesIO(text.encode("utf-8")))


def test_environments_keep_document_order():
    document = parse_text(SAMPLE_STRAPS)

    assert document.environment_names == ["dev", "prod"]
    dev = document.find_environment("dev")
    assert dev.settings == (
        Setting("CompanyName", "NEWCO-DEV"),
        Setting("UseEmail", "true"),
    )


def test_parse_from_path(tmp_path):
    path = tmp_path / "straps.xml"
    path.write_text(SAMPLE_STRAPS, encoding="utf-8")

    document = parse_document(path)
    assert document.find_environment("prod").to_dict()["ProdOnly"] == "yes"


def test_empty_root_has_no_environments():
    document = parse_text("<straps/>")
    assert document.environments == ()
    assert document.find_environment("dev") is None


def test_missing_attributes_read_as_empty_strings():
    document = parse_text('<straps><env><strap key="A"/><strap value="v"/></env></straps>')

    env = document.find_environment("")
    assert env.settings == (Setting("A", ""), Setting("", "v"))


def test_values_are_not_trimmed():
    document = parse_text('<straps><env name="dev"><strap key="Padded" value="  x  "/></env></straps>')
    assert document.find_environment("dev").to_dict() == {"Padded": "  x  "}


def test_unrelated_and_nested_elements_are_ignored():
    text = """<straps>
      <comment>ignored</comment>
      <env name="dev">
        <strap key="A" value="1"/>
        <group><strap key="Nested" value="no"/></group>
      </env>
      <other><env name="hidden"/></other>
    </straps>"""
    document = parse_text(text)

    assert document.environment_names == ["dev"]
    assert document.find_environment("dev").to_dict() == {"A": "1"}


def test_duplicate_keys_last_write_wins():
    env = Environment("dev", (Setting("A", "first"), Setting("A", "second")))
    assert env.to_dict() == {"A": "second"}


def test_duplicate_environment_names_first_wins():
    document = parse_text(
        '<straps><env name="dev"><strap key="A" value="1"/></env>'
        '<env name="dev"><strap key="A" value="2"/></env></straps>'
    )
    assert document.find_environment("dev").to_dict() == {"A": "1"}


def test_names_are_case_sensitive():
    document = parse_text(SAMPLE_STRAPS)
    assert document.find_environment("DEV") is None


@pytest.mark.parametrize("text", [
    "<straps><env name='dev'></straps>",
    "not xml at all",
    "",
])
def test_malformed_xml_raises(text):
    with pytest.raises(MalformedDocumentError):
        parse_text(text)


def test_wrong_root_element_raises():
    with pytest.raises(MalformedDocumentError, match="<straps>"):
        parse_text('<settings><env name="dev"/></settings>')


def test_content_after_root_is_ignored():
    document = parse_text(SAMPLE_STRAPS + "<extra/>trailing text")
    assert document.environment_names == ["dev", "prod"]


def test_missing_path_raises_file_not_found(tmp_path):
    with pytest.raises(StrapsFileNotFoundError) as exc_info:
        parse_document(tmp_path / "absent.xml")
    assert isinstance(exc_info.value, FileNotFoundError)
