import json

import pytest

from formtree.errors import FormTreeError, ParseError
from formtree.materializer import REQUEST_MAX_ARRAY_INDEX, Materializer
from formtree.sources import FormSource, JsonSource, QuerySource, RequestSource, parse
from formtree.sources.detect import media_type
from formtree.types import FileRef


def test_query_source_scalars() -> None:
    assert QuerySource("name=John&age=30").to_dict() == {"name": "John", "age": 30}


def test_query_source_accepts_leading_question_mark_and_bytes() -> None:
    assert QuerySource("?name=John").to_dict() == {"name": "John"}
    assert QuerySource(b"name=John").to_dict() == {"name": "John"}


def test_query_source_repeated_names_become_list() -> None:
    assert QuerySource("tags=go&tags=http&tags=api").to_dict() == {"tags": ["go", "http", "api"]}


def test_query_source_nested_brackets() -> None:
    query = "filter[user][name]=John&filter[user][role]=admin"
    assert QuerySource(query).to_dict() == {"filter": {"user": {"name": "John", "role": "admin"}}}


def test_query_source_percent_encoded_brackets() -> None:
    assert QuerySource("items%5B0%5D=first&items%5B2%5D=third").to_dict() == {"items": ["first", None, "third"]}


def test_query_source_keeps_blank_values() -> None:
    assert QuerySource("name=&age=").to_dict() == {"name": "", "age": ""}


def test_query_source_empty_query() -> None:
    assert QuerySource("").to_dict() == {}


def test_query_source_rejects_invalid_utf8() -> None:
    with pytest.raises(ParseError, match="query parse error: payload is not valid UTF-8") as excinfo:
        _ = QuerySource(b"name=\xff")
    assert excinfo.value.source == "query"
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_query_source_uses_given_materializer() -> None:
    source = QuerySource("age=30&ids[0]=1", materializer=Materializer(coerce=False))
    assert source.to_dict() == {"age": "30", "ids": ["1"]}


def test_form_source_fields_and_files() -> None:
    report = FileRef("report.pdf", 2048, "application/pdf")
    source = FormSource([("title", "Q3"), ("tags", "a"), ("tags", "b")], [("report", report)])
    assert source.to_dict() == {"title": "Q3", "tags": ["a", "b"], "report": report}


def test_form_source_multiple_files_become_list() -> None:
    files = [FileRef(f"file{index}.txt", index) for index in range(3)]
    source = FormSource([], [("files", file) for file in files])
    assert source.to_dict() == {"files": files}


def test_form_source_nested_files() -> None:
    first = FileRef("a.pdf", 1)
    second = FileRef("b.pdf", 2)
    source = FormSource(
        [("docs[0][title]", "Contracts")],
        [("docs[0][files]", first), ("docs[0][files]", second)],
    )
    assert source.to_dict() == {"docs": [{"title": "Contracts", "files": [first, second]}]}


def test_form_source_from_urlencoded() -> None:
    body = b"users[0][name]=John&users[0][email]=john%40example.com&users[1][name]=Jane&active=true"
    assert FormSource.from_urlencoded(body).to_dict() == {
        "users": [{"name": "John", "email": "john@example.com"}, {"name": "Jane"}],
        "active": True,
    }


def test_form_source_from_urlencoded_rejects_invalid_utf8() -> None:
    with pytest.raises(ParseError, match="form parse error"):
        _ = FormSource.from_urlencoded(b"\xfe\xff")


def test_json_source_decodes_object_without_coercion() -> None:
    source = JsonSource('{"name": "John", "zip": "007", "count": "5", "items": {"0": "a"}}')
    assert source.to_dict() == {"name": "John", "zip": "007", "count": "5", "items": {"0": "a"}}


def test_json_source_nested_objects_and_bytes() -> None:
    body = b'{"user": {"name": "John", "tags": ["a", "b"], "age": 30}}'
    assert JsonSource(body).to_dict() == {"user": {"name": "John", "tags": ["a", "b"], "age": 30}}


def test_json_source_empty_body() -> None:
    assert JsonSource("").to_dict() == {}
    assert JsonSource(b"  \n").to_dict() == {}


def test_json_source_invalid_body() -> None:
    with pytest.raises(ParseError, match="invalid JSON body") as excinfo:
        _ = JsonSource("{not json")
    assert excinfo.value.source == "json"
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_json_source_rejects_non_object() -> None:
    with pytest.raises(ParseError, match="JSON body must be an object, got list"):
        _ = JsonSource("[1, 2, 3]")


def test_parse_error_is_value_error() -> None:
    error = ParseError("json", "boom")
    assert isinstance(error, ValueError)
    assert isinstance(error, FormTreeError)
    assert str(error) == "json parse error: boom"
    assert error.message == "boom"


def test_to_json_renders_file_refs() -> None:
    upload = FileRef("a.txt", 3, "text/plain", stream=object())
    source = FormSource([("name", "John")], [("upload", upload)])
    assert json.loads(source.to_json()) == {
        "name": "John",
        "upload": {"filename": "a.txt", "size": 3, "content_type": "text/plain"},
    }


def test_to_json_bytes() -> None:
    source = QuerySource("names[0]=John&names[1]=Michael")
    assert source.to_json_bytes() == b'{"names": ["John", "Michael"]}'


def test_to_json_rejects_unknown_objects() -> None:
    class _Opaque(RequestSource):
        def to_dict(self) -> dict[str, object]:  # type: ignore[override]
            return {"value": object()}

    with pytest.raises(TypeError, match="Object of type object is not JSON serializable"):
        _ = _Opaque().to_json()


@pytest.mark.parametrize(
    ("content_type", "expected"),
    [
        (None, ""),
        ("", ""),
        ("application/json", "application/json"),
        ("Application/JSON; charset=utf-8", "application/json"),
        (" multipart/form-data ; boundary=x", "multipart/form-data"),
    ],
)
def test_media_type(content_type: str | None, expected: str) -> None:
    assert media_type(content_type) == expected


def test_parse_json_with_charset() -> None:
    source = parse("application/json; charset=utf-8", body='{"name": "John"}')
    assert isinstance(source, JsonSource)
    assert source.to_dict() == {"name": "John"}


def test_parse_urlencoded_form() -> None:
    source = parse("application/x-www-form-urlencoded", body=b"name=John&age=25", query="ignored=1")
    assert isinstance(source, FormSource)
    assert source.to_dict() == {"name": "John", "age": 25}


def test_parse_multipart_requires_decoded_fields() -> None:
    with pytest.raises(ParseError, match="multipart parse error"):
        _ = parse("multipart/form-data; boundary=abc", body=b"--abc--")


@pytest.mark.parametrize("content_type", [None, "", "text/plain"])
def test_parse_falls_back_to_query(content_type: str | None) -> None:
    source = parse(content_type, body=b"ignored", query="name=John&age=30")
    assert isinstance(source, QuerySource)
    assert source.to_dict() == {"name": "John", "age": 30}


def test_query_source_bounds_huge_array_indices() -> None:
    assert QuerySource("a[999999999999]=1&b[1]=2").to_dict() == {"a": {"999999999999": 1}, "b": [None, 2]}


def test_request_sources_collapse_up_to_the_default_bound() -> None:
    at_bound = QuerySource(f"a[{REQUEST_MAX_ARRAY_INDEX}]=x").to_dict()["a"]
    assert isinstance(at_bound, list)
    assert len(at_bound) == REQUEST_MAX_ARRAY_INDEX + 1
    assert QuerySource(f"a[{REQUEST_MAX_ARRAY_INDEX + 1}]=x").to_dict() == {"a": {str(REQUEST_MAX_ARRAY_INDEX + 1): "x"}}


def test_form_source_and_parse_bound_huge_array_indices() -> None:
    body = b"rows[999999999999][name]=x"
    assert FormSource.from_urlencoded(body).to_dict() == {"rows": {"999999999999": {"name": "x"}}}
    assert parse("application/x-www-form-urlencoded", body=body).to_dict() == {
        "rows": {"999999999999": {"name": "x"}}
    }
    assert parse(None, query="q[999999999999]=1").to_dict() == {"q": {"999999999999": 1}}


def test_request_sources_accept_a_custom_bound() -> None:
    source = QuerySource("a[5]=x", materializer=Materializer(max_array_index=4))
    assert source.to_dict() == {"a": {"5": "x"}}
