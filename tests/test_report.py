from datetime import datetime, timezone

from creo_build.report import BuildInfoGenerator, SummaryPrinter, boxed
from creo_build.utils import Logger, ensure_dir

FIXED_TIME = datetime(2024, 5, 1, 12, 30, 0, 250000, tzinfo=timezone.utc)
PLATFORM = {"python_version": "3.12.1", "platform": "linux"}


def _make_generator(config, logger):
    return BuildInfoGenerator(config, logger, clock=lambda: FIXED_TIME, platform_info=PLATFORM)


def test_render_header(config, logger):
    text = _make_generator(config, logger).render()

    assert text.startswith("Creo CSS Framework Build Information\n")
    assert "Build Date: 2024-05-01T12:30:00.250Z" in text
    assert "Version: 1.0.0" in text
    assert "Python Version: 3.12.1" in text
    assert "Platform: linux" in text
    assert "Total reduction: ~60% smaller than full build" in text


def test_size_table_lists_exactly_four_files(config, logger):
    ensure_dir(config.dist_dir)
    (config.dist_dir / "creo.css").write_bytes(b"x" * 1536)
    (config.dist_dir / "extra.css").write_text("ignored")

    text = _make_generator(config, logger).render()
    table = text.split("File Sizes:\n===========\n\n", 1)[1].split("\n\n", 1)[0].splitlines()

    assert table == [
        "creo.css             - 1.5 KB",
        "creo.min.css         - Unknown",
        "creo.lean.css        - Unknown",
        "creo.lean.min.css    - Unknown",
    ]


def test_generate_build_info_writes_file(config, logger):
    ensure_dir(config.dist_dir)

    path = _make_generator(config, logger).generate_build_info()

    assert path == config.dist_dir / "BUILD_INFO.txt"
    assert "Version: 1.0.0" in path.read_text()


def test_summary_lists_files_sorted(config, logger):
    ensure_dir(config.dist_dir)
    for name in ["b.css", "a.css", "c.css"]:
        (config.dist_dir / name).write_text("x")

    assert SummaryPrinter(config, logger).collect() == [
        ("a.css", "1 B"),
        ("b.css", "1 B"),
        ("c.css", "1 B"),
    ]


def test_summary_lists_directories_too(config, logger):
    ensure_dir(config.dist_dir / "maps")
    (config.dist_dir / "creo.css").write_text("x")

    names = [name for name, _ in SummaryPrinter(config, logger).collect()]

    assert names == ["creo.css", "maps"]


def test_summary_survives_missing_dist(capsys, config):
    # Logger binds sys.stdout on construction, so build it once capsys is active
    logger = Logger(verbose=True)

    SummaryPrinter(config, logger).show()

    out = capsys.readouterr().out
    assert "Build Complete!" in out
    assert "Failed to read dist directory" in out


def test_boxed_lines_are_even():
    lines = boxed("Build Complete!")
    assert len({len(line) for line in lines}) == 1
