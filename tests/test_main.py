import pytest

from creo_build.main import main


def _run(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


def test_unknown_command_exits_1(capsys, project):
    assert _run(["bogus", "--root", str(project)]) == 1
    assert "Unknown command: bogus" in capsys.readouterr().out


def test_help_exits_0(capsys):
    assert _run(["help"]) == 0
    out = capsys.readouterr().out
    assert "Build all variants (default)" in out
    assert "Watch for changes and rebuild" in out


def test_all_is_the_default(capsys, project, fake_sass):
    assert _run(["--root", str(project)]) == 0

    dist = project / "dist"
    assert (dist / "BUILD_INFO.txt").exists()
    assert "Version: 1.0.0" in (dist / "BUILD_INFO.txt").read_text()
    out = capsys.readouterr().out
    assert "Creo CSS Framework Builder" in out
    assert "Build Complete!" in out


def test_empty_command_builds_all(project, fake_sass):
    assert _run(["", "--root", str(project)]) == 0
    assert (project / "dist" / "creo.lean.min.css").exists()


def test_compile_failure_exits_1(capsys, project, make_fake_sass):
    make_fake_sass(fail_on={"creo.css"})

    assert _run(["all", "--root", str(project)]) == 1
    assert "Build failed:" in capsys.readouterr().out
    assert not (project / "dist" / "BUILD_INFO.txt").exists()


def test_missing_sass_exits_1(project, make_fake_sass):
    make_fake_sass(missing=True)
    assert _run(["expanded", "--root", str(project)]) == 1


def test_missing_manifest_exits_1(tmp_path):
    assert _run(["all", "--root", str(tmp_path)]) == 1


def test_clean_command(project, fake_sass):
    (project / "dist").mkdir()
    (project / "dist" / "old.css").write_text("x")

    assert _run(["clean", "--root", str(project)]) == 0
    assert list((project / "dist").iterdir()) == []


def test_no_source_map_flag(project, fake_sass):
    assert _run(["expanded", "--root", str(project), "--no-source-map"]) == 0
    compile_call = fake_sass.calls[-1]
    assert "--no-source-map" in compile_call
    assert "--source-map" not in compile_call


def test_interrupt_exits_0(capsys, project, monkeypatch, fake_sass):
    def interrupted(self):
        raise KeyboardInterrupt

    monkeypatch.setattr("creo_build.builders.orchestrator.BuildOrchestrator.build_all", interrupted)

    assert _run(["all", "--root", str(project)]) == 0
    assert "Build interrupted by user" in capsys.readouterr().out
