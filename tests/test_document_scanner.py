"""Tests for docmerge.scanners.document_scanner."""

from __future__ import annotations

from docmerge.schemas import ConventionMatch, RepositoryConvention
from docmerge.scanners import DocumentScanner, find_component_docs


def test_overview_directory_is_excluded(repo_builder) -> None:
    repo_builder.write(
        {
            "components/button/index.zh-CN.md": "# Button\n",
            "components/input/index.zh-CN.md": "# Input\n",
            "components/overview/index.zh-CN.md": "# Overview\n",
            "components/_util/index.zh-CN.md": "# Util\n",
        }
    )

    docs = DocumentScanner(repo_builder.path()).find_docs("components", "index.zh-CN.md")

    assert docs == [
        "components/button/index.zh-CN.md",
        "components/input/index.zh-CN.md",
    ]


def test_missing_search_dir_returns_empty(repo_builder) -> None:
    assert DocumentScanner(repo_builder.path()).find_docs("components", "index.md") == []


def test_directories_without_doc_and_plain_files_are_skipped(repo_builder) -> None:
    repo_builder.write(
        {
            "components/button/index.zh-CN.md": "# Button\n",
            "components/icon/index.en-US.md": "# Icon\n",
            "components/index.ts": "export {};\n",
        }
    )

    docs = DocumentScanner(repo_builder.path()).find_docs("components", "index.zh-CN.md")

    assert docs == ["components/button/index.zh-CN.md"]


def test_custom_exclusion_predicate(repo_builder) -> None:
    repo_builder.write(
        {
            "components/button/index.md": "",
            "components/overview/index.md": "",
        }
    )

    scanner = DocumentScanner(repo_builder.path(), exclude=lambda name: name == "button")

    assert scanner.find_docs("components", "index.md") == ["components/overview/index.md"]


def test_named_convention_scans_its_directory(repo_builder) -> None:
    repo_builder.write(
        {
            "src/components/button/index.zh.md": "# Button\n",
            "src/components/button/index.en.md": "# Button\n",
            "components/card/index.zh-CN.md": "# Card\n",
        }
    )

    docs = find_component_docs(repo_builder.path(), "https://github.com/ant-design/ant-design-mobile")

    assert docs == ["src/components/button/index.zh.md"]


def test_unknown_layout_tries_candidates_in_order(repo_builder) -> None:
    repo_builder.write(
        {
            "src/components/button/index.md": "# Button\n",
            "src/components/tabs/index.md": "# Tabs\n",
            "src/utils/index.md": "# Not a component\n",
        }
    )

    docs = find_component_docs(repo_builder.path(), "https://example.com/acme/widgets")

    assert docs == [
        "src/components/button/index.md",
        "src/components/tabs/index.md",
    ]


def test_first_non_empty_candidate_wins(repo_builder) -> None:
    repo_builder.write(
        {
            "components/button/index.zh.md": "# Button\n",
            "components/card/index.md": "# Card\n",
        }
    )

    docs = find_component_docs(repo_builder.path(), "")

    assert docs == ["components/button/index.zh.md"]


def test_glob_search_dedupes_in_first_seen_order_and_excludes(repo_builder) -> None:
    repo_builder.write(
        {
            "components/button/index.md": "",
            "components/button/extra.md": "",
            "components/overview/index.md": "",
            "src/components/_util/index.md": "",
        }
    )

    docs = DocumentScanner(repo_builder.path()).find_docs_by_glob(
        ["components/*/index.md", "components/*/*.md", "src/components/*/index.md"]
    )

    assert docs == ["components/button/index.md", "components/button/extra.md"]


def test_fallback_uses_glob_when_candidates_find_nothing(repo_builder) -> None:
    repo_builder.write({"packages/ui/components/alert/index.md": "# Alert\n"})
    match = ConventionMatch(candidates=[], glob_patterns=["packages/*/components/*/index.md"])

    docs = DocumentScanner(repo_builder.path()).find_component_docs(match)

    assert docs == ["packages/ui/components/alert/index.md"]


def test_nothing_found_anywhere(repo_builder) -> None:
    repo_builder.write({"README.md": "# Widgets\n"})

    assert find_component_docs(repo_builder.path(), "https://example.com/acme/widgets") == []


def test_convention_exclusions_apply_to_named_scan(repo_builder) -> None:
    repo_builder.write(
        {
            "components/button/index.md": "",
            "components/overview/index.md": "",
            "components/locale/index.md": "",
        }
    )
    convention = RepositoryConvention(
        name="custom",
        search_dir="components",
        filename_pattern="index.md",
        excluded_dir_names=frozenset({"locale"}),
    )

    docs = DocumentScanner(repo_builder.path()).find_docs_for(convention)

    assert docs == ["components/button/index.md", "components/overview/index.md"]
