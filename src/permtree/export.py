"""
Writes benchmark timings as a whitespace separated table
and a gnuplot script that plots them.
"""

import dataclasses
import logging
import os.path
from typing import List, Mapping, Sequence

import tensorflow as tf

DATA_FILE = "timings.dat"
PLOT_SCRIPT_FILE = "plot.gp"
PLOT_IMAGE_FILE = "timings.png"


@dataclasses.dataclass(frozen=True)
class TimingRecord:
    size: int
    timings: Mapping[str, float]


def write_timings_table(
    path: str, methods: Sequence[str], records: Sequence[TimingRecord]
) -> None:
    """
    Writes one row per tree size: the size, then the time of each method.

    Args:
        path: output file.
        methods: column order.
        records: timings per tree size.
    """
    with tf.io.gfile.GFile(path, "w") as writer:
        logging.info("Writing %s", path)
        writer.write("\t".join(["# n", *methods]))
        writer.write("\n")
        for record in records:
            values = [f"{record.timings[method]:.3f}" for method in methods]
            writer.write("\t".join([str(record.size), *values]))
            writer.write("\n")


def read_timings_table(path: str) -> List[TimingRecord]:
    """
    Reads a table written by `write_timings_table`.
    """
    with tf.io.gfile.GFile(path, "r") as reader:
        lines = [line.strip() for line in reader.read().splitlines()]
    if not lines or not lines[0].startswith("#"):
        raise ValueError(f"File {path} has no header")
    methods = lines[0].lstrip("#").split()[1:]
    records = []
    for line in lines[1:]:
        if not line:
            continue
        size, *values = line.split()
        if len(values) != len(methods):
            raise ValueError(
                f"Expected {len(methods)} values, got {len(values)}: {line}"
            )
        records.append(
            TimingRecord(
                size=int(size),
                timings={
                    method: float(value) for method, value in zip(methods, values)
                },
            )
        )
    return records


def write_plot_script(path: str, data_file: str, methods: Sequence[str]) -> None:
    """
    Writes a gnuplot script rendering each method as a line, log scale on y.
    Rendered with `gnuplot <path>` from the script's directory.
    """
    plots = [
        f"'{data_file}' using 1:{column} with linespoints title '{method}'"
        for column, method in enumerate(methods, start=2)
    ]
    lines = [
        "set terminal pngcairo size 1024,768",
        f"set output '{PLOT_IMAGE_FILE}'",
        "set title 'Permutation tree lookups'",
        "set xlabel 'n'",
        "set ylabel 'time (us)'",
        "set logscale y",
        "set grid",
        "set key left top",
        "plot " + ", \\\n     ".join(plots),
    ]
    with tf.io.gfile.GFile(path, "w") as writer:
        logging.info("Writing %s", path)
        writer.write("\n".join(lines))
        writer.write("\n")


def export_timings(
    output_dir: str, methods: Sequence[str], records: Sequence[TimingRecord]
) -> None:
    """
    Writes the timings table and its plot script into `output_dir`.
    """
    if not tf.io.gfile.exists(output_dir):
        tf.io.gfile.makedirs(output_dir)
    write_timings_table(
        os.path.join(output_dir, DATA_FILE), methods=methods, records=records
    )
    write_plot_script(
        os.path.join(output_dir, PLOT_SCRIPT_FILE), data_file=DATA_FILE, methods=methods
    )
