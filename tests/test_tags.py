from dataclasses import dataclass, field, fields

from formcodec.tags import FieldTag, field_tags, form_field, parse_tag


@dataclass
class ComplexForm:
    id: int = form_field("id", default=0)
    name: str = form_field("name", default="")
    aliases: list = form_field("aliases,omitempty", default_factory=list)
    age: int = form_field("age", default=0)
    created_at: object = form_field("created_at", default=None)
    private: str = form_field("-", default="")
    optional: object = form_field("optional,omitempty", default=None)


@dataclass
class IgnoredFieldsForm:
    public: str = form_field("public", default="")
    private: str = form_field("-", default="")
    ignored: str = form_field(",ignore", default="")
    NoTag: str = ""
    Empty: str = form_field("", default="")
    Omitted: str = form_field(",omitempty", default="")
    complex_: object = form_field("complex,omitempty", default=None)


def test_parse_tag_hyphen_ignores():
    assert parse_tag("-") == FieldTag(ignore=True)


def test_parse_tag_name_only():
    assert parse_tag("name") == FieldTag(name="name")


def test_parse_tag_omitempty():
    assert parse_tag("aliases,omitempty") == FieldTag(name="aliases", omit=True)


def test_parse_tag_ignore_flag_without_name():
    assert parse_tag(",ignore") == FieldTag(name="", ignore=True)


def test_parse_tag_empty():
    assert parse_tag("") == FieldTag()


def test_parse_tag_hyphen_name_with_flags():
    assert parse_tag("-,omitempty") == FieldTag(name="", omit=True, ignore=True)


def test_parse_tag_unknown_flag_is_dropped():
    assert parse_tag("x,unknown") == FieldTag(name="x")


def test_field_tags_of_ignored_fields_form():
    assert field_tags(IgnoredFieldsForm) == {
        "public": FieldTag(name="public"),
        "private": FieldTag(ignore=True),
        "ignored": FieldTag(ignore=True),
        "NoTag": FieldTag(name="NoTag"),
        "Empty": FieldTag(name="Empty"),
        "Omitted": FieldTag(name="Omitted", omit=True),
        "complex_": FieldTag(name="complex", omit=True),
    }


def test_field_tags_of_complex_form_keep_field_order():
    tags = field_tags(ComplexForm)
    assert list(tags) == [f.name for f in fields(ComplexForm)]
    assert tags["aliases"] == FieldTag(name="aliases", omit=True)
    assert tags["private"].ignore is True


def test_field_tags_same_for_instance_and_class():
    assert field_tags(ComplexForm(id=1)) == field_tags(ComplexForm)


def test_field_tags_of_non_dataclass_is_empty():
    assert field_tags(dict) == {}
    assert field_tags(42) == {}


def test_field_tags_skip_private_fields():
    @dataclass
    class WithPrivate:
        visible: str = ""
        _hidden: str = ""

    assert list(field_tags(WithPrivate)) == ["visible"]


def test_form_field_keeps_metadata_and_default():
    @dataclass
    class Tagged:
        value: int = form_field("v", default=7, metadata={"unit": "s"})

    (only,) = fields(Tagged)
    assert only.metadata["unit"] == "s"
    assert only.metadata["form"] == "v"
    assert Tagged().value == 7
    assert field_tags(Tagged) == {"value": FieldTag(name="v")}


def test_plain_metadata_tag_is_read():
    @dataclass
    class Plain:
        value: int = field(default=0, metadata={"form": "val,omitempty"})

    assert field_tags(Plain)["value"] == FieldTag(name="val", omit=True)