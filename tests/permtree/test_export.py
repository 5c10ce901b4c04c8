import os.path

import pytest

from permtree import export

METHODS = ("all_permutations", "by_traversal", "by_factorial")


def test_timings_table_serdes(tmpdir):
    path = os.path.join(str(tmpdir), export.DATA_FILE)
    records = [
        export.TimingRecord(
            size=1,
            timings={"all_permutations": 3.0, "by_traversal": 1.5, "by_factorial": 1.25},
        ),
        export.TimingRecord(
            size=2,
            timings={"all_permutations": 7.0, "by_traversal": 2.5, "by_factorial": 1.75},
        ),
    ]
    export.write_timings_table(path, methods=METHODS, records=records)

    with open(path) as reader:
        lines = reader.read().splitlines()
    assert lines[0] == "# n\tall_permutations\tby_traversal\tby_factorial"
    assert lines[1] == "1\t3.000\t1.500\t1.250"
    assert export.read_timings_table(path) == records


def test_read_timings_table_without_header(tmpdir):
    path = os.path.join(str(tmpdir), "bad.dat")
    with open(path, "w") as writer:
        writer.write("1\t2.0\n")
    with pytest.raises(ValueError):
        export.read_timings_table(path)


def test_write_plot_script(tmpdir):
    path = os.path.join(str(tmpdir), export.PLOT_SCRIPT_FILE)
    export.write_plot_script(path, data_file=export.DATA_FILE, methods=METHODS)

    with open(path) as reader:
        script = reader.read()
    assert "set logscale y" in script
    assert f"set output '{export.PLOT_IMAGE_FILE}'" in script
    for column, method in enumerate(METHODS, start=2):
        assert f"'timings.dat' using 1:{column} with linespoints title '{method}'" in script


def test_export_timings(tmpdir):
    output_dir = os.path.join(str(tmpdir), "nested", "run")
    records = [export.TimingRecord(size=1, timings={"by_factorial": 1.0})]
    export.export_timings(output_dir, methods=("by_factorial",), records=records)

    assert os.path.exists(os.path.join(output_dir, export.DATA_FILE))
    assert os.path.exists(os.path.join(output_dir, export.PLOT_SCRIPT_FILE))
    assert export.read_timings_table(
        os.path.join(output_dir, export.DATA_FILE)
    ) == records
