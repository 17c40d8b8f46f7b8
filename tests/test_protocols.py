"""Tests for protocol document materialization."""

from pathlib import Path

from scaffolding import PROTOCOL_DOCUMENTS, ProtocolMaterializer, bundled_protocols_dir


EXPECTED_DOCUMENTS = [
    "CodeOrganizationFramework.md",
    "DocumentationFramework.md",
    "GitWorkflowPatterns.md",
    "ProtocolEvolutionFramework.md",
]


def _tree(root: Path) -> dict[str, bytes | None]:
    return {
        str(path.relative_to(root)): (path.read_bytes() if path.is_file() else None)
        for path in sorted(root.rglob("*"))
    }


def test_fallback_writes_four_documents(tmp_path):
    materializer = ProtocolMaterializer(tmp_path / "missing")
    target = tmp_path / "project" / "BestPractices" / "Generic"

    assert not materializer.has_source
    written = materializer.materialize(target)

    assert sorted(path.name for path in written) == EXPECTED_DOCUMENTS
    assert sorted(path.name for path in target.iterdir()) == EXPECTED_DOCUMENTS
    for name in EXPECTED_DOCUMENTS:
        content = (target / name).read_text(encoding="utf-8")
        assert content.strip()
        assert content == PROTOCOL_DOCUMENTS[name]


def test_builtin_documents_have_titles():
    assert PROTOCOL_DOCUMENTS["CodeOrganizationFramework.md"].startswith("# Code Organization Framework\n")
    assert PROTOCOL_DOCUMENTS["GitWorkflowPatterns.md"].startswith("# Git Workflow Patterns\n")
    assert PROTOCOL_DOCUMENTS["DocumentationFramework.md"].startswith("# Documentation Framework\n")
    assert PROTOCOL_DOCUMENTS["ProtocolEvolutionFramework.md"].startswith(
        "# Protocol Evolution Framework\n"
    )


def test_copy_reproduces_structure_and_bytes(tmp_path):
    source = tmp_path / "source"
    (source / "nested" / "deeper").mkdir(parents=True)
    (source / "empty-dir").mkdir()
    (source / "Guide.md").write_text("# Guide\n\nUse it.\n", encoding="utf-8")
    (source / "nested" / "notes.txt").write_bytes(b"line one\r\nline two\n")
    (source / "nested" / "deeper" / "blob.bin").write_bytes(bytes(range(256)))

    target = tmp_path / "project" / "BestPractices" / "Generic"
    materializer = ProtocolMaterializer(source)

    assert materializer.has_source
    written = materializer.materialize(target)

    assert _tree(target) == _tree(source)
    assert len(written) == 3
    for name in EXPECTED_DOCUMENTS:
        assert not (target / name).exists()


def test_source_that_is_a_file_falls_back(tmp_path):
    source = tmp_path / "not-a-dir"
    source.write_text("x")

    written = ProtocolMaterializer(source).materialize(tmp_path / "target")

    assert len(written) == 4


def test_default_source_is_bundled_directory():
    materializer = ProtocolMaterializer()

    assert materializer.source_dir == bundled_protocols_dir()
    assert bundled_protocols_dir().parts[-2:] == ("BestPractices", "Generic")
