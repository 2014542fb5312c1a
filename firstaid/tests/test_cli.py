import json
from pathlib import Path

from firstaid.cli import app
from firstaid.knowledge_base import CHOKING
from typer.testing import CliRunner


def test_guide_prints_guidance():
    runner = CliRunner()
    res = runner.invoke(app, ["guide", "my son is choking"])
    assert res.exit_code == 0
    assert res.stdout.strip() == CHOKING


def test_guide_with_profile(tmp_path: Path):
    runner = CliRunner()
    profile = tmp_path / "profile.json"
    res = runner.invoke(app, ["init-profile", "--out", str(profile)])
    assert res.exit_code == 0
    assert Path(res.stdout.strip()).exists()

    res2 = runner.invoke(app, ["guide", "about me: chest pain", "--profile", str(profile), "--json"])
    assert res2.exit_code == 0
    out = json.loads(res2.stdout)
    assert out["personalized"] is True
    assert out["key"] == "chest pain"
    assert "aspirin 75mg" in out["output"]
    assert out["disclosed"][-1] == "emergency_contact"

    res3 = runner.invoke(app, ["guide", "chest pain", "--profile", str(profile)])
    assert res3.exit_code == 0
    assert "Sam Example" not in res3.stdout


def test_guide_bad_profile(tmp_path: Path):
    runner = CliRunner()
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    res = runner.invoke(app, ["guide", "burn", "--profile", str(bad)])
    assert res.exit_code == 1


def test_guide_with_knowledge_pack(tmp_path: Path):
    runner = CliRunner()
    kb = tmp_path / "kb"
    kb.mkdir()
    (kb / "zoo.json").write_text(json.dumps([{"keys": ["zebra"], "guidance": "1. Back away."}]), encoding="utf-8")
    res = runner.invoke(app, ["guide", "zebra kick", "--kb", str(kb)])
    assert res.exit_code == 0
    assert res.stdout.strip() == "1. Back away."

    res2 = runner.invoke(app, ["guide", "zebra kick", "--kb", str(tmp_path / "missing")])
    assert res2.exit_code == 1


def test_questions_command():
    runner = CliRunner()
    res = runner.invoke(app, ["questions", "unconscious person not breathing"])
    assert res.exit_code == 0
    assert res.stdout.splitlines()[0] == "1. Is the person breathing?"

    res2 = runner.invoke(app, ["questions", "he fell", "--suggestions"])
    assert res2.exit_code == 0
    assert res2.stdout.splitlines()[0] == "1. Did they hit their head?"


def test_supplies_command():
    runner = CliRunner()
    res = runner.invoke(app, ["supplies", "burn", "--limit", "1"])
    assert res.exit_code == 0
    assert res.stdout.strip() == "[critical] Burn Treatment Gel - $12.99: Cooling gel with aloe vera for treating minor burns"

    res2 = runner.invoke(app, ["supplies", "sprain", "--min-urgency", "critical", "--json"])
    assert res2.exit_code == 0
    assert [i["id"] for i in json.loads(res2.stdout)] == ["cold-pack"]

    res3 = runner.invoke(app, ["supplies", "sprain", "--min-urgency", "urgent"])
    assert res3.exit_code == 1


def test_validate_kb_command(tmp_path: Path):
    runner = CliRunner()
    res = runner.invoke(app, ["validate-kb"])
    assert res.exit_code == 0
    assert res.stdout.splitlines()[0].startswith("guidance: ")

    kb = tmp_path / "kb"
    kb.mkdir()
    (kb / "empty.json").write_text(json.dumps([{"keys": ["zebra"], "guidance": "1. Back away."}]), encoding="utf-8")
    res2 = runner.invoke(app, ["validate-kb", "--kb", str(kb)])
    assert res2.exit_code == 0


def test_version_command():
    runner = CliRunner()
    res = runner.invoke(app, ["version"])
    assert res.exit_code == 0
    assert res.stdout.strip()


def test_version_falls_back_when_not_installed(monkeypatch):
    import importlib.metadata

    from firstaid import __version__

    def not_installed(name):
        raise importlib.metadata.PackageNotFoundError(name)

    monkeypatch.setattr(importlib.metadata, "version", not_installed)
    res = CliRunner().invoke(app, ["version"])
    assert res.exit_code == 0
    assert res.stdout.strip() == __version__


def test_version_does_not_hide_other_errors(monkeypatch):
    import importlib.metadata

    def broken(name):
        raise RuntimeError("metadata unreadable")

    monkeypatch.setattr(importlib.metadata, "version", broken)
    res = CliRunner().invoke(app, ["version"])
    assert res.exit_code != 0
    assert isinstance(res.exception, RuntimeError)
