#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from prefixcodes.logger import Logger, Log, LogLevel, CodeAssignmentLog, MergeProgressStep, PartitionProgressStep

class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123) 

    def test_string_log(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].type_name, "General")

    def test_info_not_displayed_by_default(self):
        self.logger.log(CodeAssignmentLog("huffman", "a", "01"))
        self.assertEqual(len(self.logger.get_logs(CodeAssignmentLog)), 1)
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        printed_output = self.captured_output.getvalue()
        self.assertIn("This is a warning", printed_output)

    def test_error_logging(self):
        error_log = Log("ErrorTest", LogLevel.ERROR, "This is an error")
        self.logger.log(error_log)
        self.assertEqual(len(self.logger.logs), 1)
        
        printed_output = self.captured_output.getvalue()
        self.assertIn("This is an error", printed_output)

    def test_progress_counting(self):
        self.logger.record_progress = True
        self.logger.display_progress = True
        self.logger.merge_step_interval_count = 2
        for _ in range(3):
            self.logger.log(MergeProgressStep("Merging", 3))
        self.logger.log(PartitionProgressStep("Splitting"))
        self.assertEqual(self.logger.merge_progress_count, 3)
        self.assertEqual(self.logger.partition_progress_count, 1)
        self.assertEqual(self.logger.logs[2].message, "Merging (3/3)")
        self.assertEqual(self.logger.logs[3].message, "Splitting (1)")
        self.assertIn("Merging (2/3)", self.captured_output.getvalue())
        self.assertNotIn("Merging (1/3)", self.captured_output.getvalue())

    def test_unknown_progress_step(self):
        with self.assertRaises(ValueError):
            self.logger.log(Log("Custom", LogLevel.PROGRESS, "step"))

    def test_save_and_clear(self):
        self.logger.log("first")
        self.logger.log("second")
        with tempfile.NamedTemporaryFile(delete=False) as temp_file:
            temp_file_name = temp_file.name
        try:
            self.logger.save(temp_file_name)
            with open(temp_file_name) as file:
                lines = file.read().splitlines()
            self.assertEqual(len(lines), 2)
            self.assertIn("second", lines[1])
        finally:
            os.remove(temp_file_name)
        self.logger.clear()
        self.assertEqual(self.logger.logs, [])

if __name__ == '__main__':
    unittest.main()
