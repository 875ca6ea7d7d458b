"""Tests for docmerge.extractors.reference_parser."""

from __future__ import annotations

from docmerge.extractors import parse_demo_references


def test_parses_references_in_document_order() -> None:
    content = (
        "# Button\n\n"
        '<code src="./demo/basic.tsx">Basic</code>\n'
        '<code src="./demo/size" debug>Size</code>\n'
    )

    refs = parse_demo_references(content)

    assert [r.demo_path for r in refs] == ["./demo/basic.tsx", "./demo/size"]
    assert [r.description for r in refs] == ["Basic", "Size"]
    assert refs[1].raw_markup_span == '<code src="./demo/size" debug>Size</code>'
    assert content[refs[0].start:refs[0].end] == refs[0].raw_markup_span


def test_no_references_is_empty() -> None:
    assert parse_demo_references("# Title\n\n```tsx\n<Button />\n```\n") == []


def test_tags_without_src_are_ignored() -> None:
    assert parse_demo_references("Use <code>type</code> to pick a style.") == []


def test_empty_description_is_kept() -> None:
    refs = parse_demo_references('<code src="./demo/a.tsx"></code>')
    assert len(refs) == 1
    assert refs[0].description == ""


def test_repeated_identical_tags_have_distinct_spans() -> None:
    tag = '<code src="./demo/a.tsx">A</code>'
    refs = parse_demo_references(f"{tag}\n{tag}\n")

    assert len(refs) == 2
    assert refs[0].start == 0
    assert refs[1].start == len(tag) + 1
