"""Tests for docmerge.extractors.demo_resolver."""

from __future__ import annotations

import logging

import docmerge.extractors.demo_resolver as demo_resolver_module
from docmerge.extractors import DemoResolver, candidate_paths, detect_fence_language, parse_demo_references


def _ref(src: str, description: str = "demo"):
    return parse_demo_references(f'<code src="{src}">{description}</code>')[0]


def test_candidate_paths_try_tsx_before_ts() -> None:
    assert candidate_paths("./demo/basic") == ["./demo/basic.tsx", "./demo/basic.ts"]


def test_explicit_extension_bypasses_trial() -> None:
    assert candidate_paths("./demo/basic.jsx") == ["./demo/basic.jsx"]
    assert candidate_paths("./demo/basic.tsx") == ["./demo/basic.tsx"]


def test_fence_language_follows_extension() -> None:
    assert detect_fence_language("demo/a.tsx") == "tsx"
    assert detect_fence_language("demo/a.ts") == "ts"
    assert detect_fence_language("demo/a.jsx") == "jsx"
    assert detect_fence_language("demo/a.md") == "md"
    assert detect_fence_language("demo/a.less") == "less"


def test_prefers_tsx_when_both_exist(repo_builder) -> None:
    repo_builder.write(
        {
            "components/button/demo/basic.tsx": "tsx source",
            "components/button/demo/basic.ts": "ts source",
        }
    )

    demo = DemoResolver(repo_builder.path()).resolve(_ref("./demo/basic"), "components/button")

    assert demo.source_code == "tsx source"
    assert demo.language == "tsx"
    assert demo.resolved_path.endswith("basic.tsx")


def test_falls_back_to_ts(repo_builder) -> None:
    repo_builder.write({"components/button/demo/hooks.ts": "export const useX = 1;"})

    demo = DemoResolver(repo_builder.path()).resolve(_ref("./demo/hooks"), "components/button")

    assert demo.source_code == "export const useX = 1;"
    assert demo.language == "ts"


def test_explicit_extension_is_not_extended(repo_builder) -> None:
    repo_builder.write({"components/button/demo/basic.tsx.tsx": "wrong file"})

    demo = DemoResolver(repo_builder.path()).resolve(_ref("./demo/basic.tsx"), "components/button")

    assert demo is None


def test_sibling_notes_are_read(repo_builder) -> None:
    repo_builder.write(
        {
            "components/button/demo/basic.tsx": "code",
            "components/button/demo/basic.md": "Notes about the demo.",
        }
    )

    demo = DemoResolver(repo_builder.path()).resolve(_ref("./demo/basic"), "components/button")

    assert demo.sibling_notes == "Notes about the demo."


def test_missing_or_empty_notes_are_absent(repo_builder) -> None:
    repo_builder.write(
        {
            "components/button/demo/basic.tsx": "code",
            "components/button/demo/empty.tsx": "code",
            "components/button/demo/empty.md": "",
        }
    )
    resolver = DemoResolver(repo_builder.path())

    assert resolver.resolve(_ref("./demo/basic"), "components/button").sibling_notes is None
    assert resolver.resolve(_ref("./demo/empty"), "components/button").sibling_notes is None


def test_missing_demo_logs_one_warning(repo_builder, caplog) -> None:
    repo_builder.write({"components/button/index.md": "# Button\n"})

    with caplog.at_level(logging.WARNING, logger="docmerge"):
        demo = DemoResolver(repo_builder.path()).resolve(_ref("./demo/missing"), "components/button")

    assert demo is None
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "./demo/missing" in warnings[0].getMessage()


def test_line_endings_are_preserved(repo_builder) -> None:
    repo_builder.write({"components/button/demo/crlf.tsx": "a\r\nb\r\n"})

    demo = DemoResolver(repo_builder.path()).resolve(_ref("./demo/crlf"), "components/button")

    assert demo.source_code == "a\r\nb\r\n"


def test_invalid_utf8_is_replaced_not_dropped(repo_builder) -> None:
    demo_file = repo_builder.path() / "components" / "button" / "demo" / "basic.tsx"
    demo_file.parent.mkdir(parents=True)
    demo_file.write_bytes(b"const label = 'caf\xe9';")

    demo = DemoResolver(repo_builder.path()).resolve(_ref("./demo/basic"), "components/button")

    assert demo.source_code == "const label = 'caf\ufffd';"


def test_unreadable_demo_is_logged_and_unresolved(repo_builder, monkeypatch, caplog) -> None:
    repo_builder.write({"components/button/demo/basic.tsx": "code"})

    def failing_open(file, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(file))

    monkeypatch.setattr(demo_resolver_module, "open", failing_open, raising=False)

    with caplog.at_level(logging.WARNING, logger="docmerge"):
        demo = DemoResolver(repo_builder.path()).resolve(_ref("./demo/basic"), "components/button")

    assert demo is None
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "basic.tsx" in errors[0].getMessage()
