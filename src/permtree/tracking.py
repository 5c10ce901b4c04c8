"""
Module for classes and functions to log benchmark timings,
to std output or files.
"""


import contextlib
import json
import os.path
import types
from typing import Any, Dict, List, Mapping, Optional, Type, Union

import numpy as np
import tensorflow as tf


class TimingStats:
    """
    Tracks timings, in microseconds, of each lookup method.
    """

    def __init__(self):
        self._timings: Dict[str, List[float]] = {}

    def add(self, method: str, elapsed_us: float) -> None:
        """
        Records one measurement for `method`.
        """
        self._timings.setdefault(method, []).append(elapsed_us)

    def count(self, method: str) -> int:
        return len(self._timings.get(method, []))

    def mean(self, method: str) -> float:
        """
        Returns the average time for `method`, or 0.0 if it has no measurements.
        """
        timings = self._timings.get(method)
        if not timings:
            return 0.0
        return float(np.mean(timings))

    @property
    def methods(self) -> List[str]:
        return list(self._timings.keys())

    def as_dict(self) -> Dict[str, float]:
        return {method: self.mean(method) for method in self._timings}

    def __str__(self) -> str:
        """
        Class represented as a logging message.
        """
        return ", ".join(
            f"{method}(us): {self.mean(method):.2f}" for method in self._timings
        )


class ExperimentLogger(contextlib.AbstractContextManager):
    """
    Logs timings of a benchmark, one entry per tree size.
    """

    LOG_FILE_NAME = "experiment-logs.jsonl"
    PARAM_FILE_NAME = "experiment-params.json"

    def __init__(
        self, log_dir: str, name: str, params: Mapping[str, Union[int, float, str]]
    ):
        self.log_file = os.path.join(log_dir, self.LOG_FILE_NAME)
        self.param_file = os.path.join(log_dir, self.PARAM_FILE_NAME)
        if not tf.io.gfile.exists(log_dir):
            tf.io.gfile.makedirs(log_dir)

        with tf.io.gfile.GFile(self.param_file, "w") as writer:
            writer.write(json.dumps(dict(params, name=name)))

        self._writer: Optional[tf.io.gfile.GFile] = None

    def open(self) -> None:
        """
        Opens the log file for writing.
        """
        self._writer = tf.io.gfile.GFile(self.log_file, "w")

    def close(self) -> None:
        """
        Closes the log file.
        """
        if self._writer is None:
            raise RuntimeError("File is not opened")
        self._writer.close()
        self._writer = None

    def __enter__(self) -> "ExperimentLogger":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[types.TracebackType],
    ) -> None:
        self.close()
        super().__exit__(exc_type, exc_value, traceback)

    def log(
        self,
        size: int,
        total_permutations: int,
        timings: Mapping[str, float],
        metadata: Optional[Mapping[str, Any]] = None,
    ):
        """
        Logs a benchmark entry for a tree size.
        """
        entry = {
            "size": size,
            "total_permutations": total_permutations,
            "timings": dict(timings),
            "metadata": metadata if metadata is not None else {},
        }

        if self._writer is None:
            raise RuntimeError("File is not opened")
        self._writer.write(f"{json.dumps(entry)}\n")
