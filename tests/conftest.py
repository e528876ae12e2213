import pytest


@pytest.fixture
def artifact_dir(tmp_path, monkeypatch):
    """Lay out a fake `cargo lambda build` output and run from cdk/ like the toolkit does."""
    artifact = tmp_path / "target" / "lambda"
    artifact.mkdir(parents=True)
    (artifact / "my_rust_binary").write_bytes(b"\x7fELF fake binary")

    cdk_dir = tmp_path / "cdk"
    cdk_dir.mkdir()
    monkeypatch.chdir(cdk_dir)
    return artifact
