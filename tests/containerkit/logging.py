from unittest import TestCase
from pathlib import Path
import logging
import tempfile

import pytest

from containerkit import logging as mdl
from containerkit.heap import MaxHeap
from containerkit.queue import Queue, QueueUnderflow
from containerkit.validation import ParameterChoiceError


class TestConfigureLoggingHandler(TestCase):
    def setUp(self):
        self.logger = logging.getLogger(mdl.PACKAGE_LOGGER)
        self.level_0 = self.logger.level

    def tearDown(self):
        self.logger.setLevel(self.level_0)

    def _read_log(self, handler):
        handler.flush()
        with open(handler.baseFilename, "rt") as log_fo:
            return log_fo.read()

    def test_file_handler(self):
        with tempfile.TemporaryDirectory() as tmpd:
            handler = mdl.configure_logging_handler(filename=tmpd, level="DEBUG")
            try:
                self.assertIsInstance(handler, logging.FileHandler)
                self.assertEqual(Path(handler.baseFilename).parent, Path(tmpd))
                # No extra setup needed for the DEBUG records to get through.
                self.assertEqual(self.logger.getEffectiveLevel(), logging.DEBUG)

                heap = MaxHeap([1, 2, 3, 2])
                heap.remove_all(2)
                text = self._read_log(handler)
            finally:
                self.logger.removeHandler(handler)
                handler.close()

        self.assertRegex(text, "(?ms).*DEBUG[^\n]*containerkit.heap.*Built MaxHeap.*")
        self.assertRegex(text, "(?ms).*Removed 2 element.*")

    def test_log_filter(self):
        with tempfile.TemporaryDirectory() as tmpd:
            handler = mdl.configure_logging_handler(
                filename=Path(tmpd) / "queue.log",
                level="DEBUG",
                log_filter=logging.Filter("containerkit.queue"),
            )
            try:
                MaxHeap([1, 2, 3])
                with self.assertRaises(QueueUnderflow):
                    Queue().dequeue()
                text = self._read_log(handler)
            finally:
                self.logger.removeHandler(handler)
                handler.close()

        self.assertRegex(text, "(?ms).*containerkit.queue.*empty queue.*")
        self.assertNotRegex(text, "(?ms).*Built MaxHeap.*")

    def test_level_never_raised(self):
        self.logger.setLevel(logging.DEBUG)
        handler = mdl.configure_logging_handler(level="WARNING")
        try:
            self.assertNotIsInstance(handler, logging.FileHandler)
            self.assertIn(handler, self.logger.handlers)
            self.assertEqual(handler.level, logging.WARNING)
            self.assertEqual(self.logger.level, logging.DEBUG)
        finally:
            self.logger.removeHandler(handler)

    def test_invalid_level(self):
        with self.assertRaises(ParameterChoiceError):
            mdl.configure_logging_handler(level="VERBOSE")


class TestLogTime(TestCase):
    @pytest.fixture(autouse=True)
    def inject_fixtures(self, caplog):
        self._caplog = caplog

    def test_log_time(self):
        logger = logging.getLogger("containerkit.test")
        with self._caplog.at_level(logging.INFO, logger="containerkit.test"):
            with mdl.log_time("my operation", logger=logger):
                pass
        messages = [record.getMessage() for record in self._caplog.records]
        self.assertEqual(len(messages), 2)
        self.assertIn("STARTED my operation", messages[0])
        self.assertIn("FINISHED my operation", messages[1])
