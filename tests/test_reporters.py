import sys
import threading
import unittest

import expectations
from expectations import locations
from expectations import reporters
from expectations.reporters import FailureKind

from tests.utils import (
    RecordingLogger,
    RecordingSignal,
    make_context,
    preserve_defaults,
)


class BannerTest(unittest.TestCase):

    def test_check(self):
        banner = reporters.Banner()
        self.assertTrue(banner.check('a.py'))
        self.assertFalse(banner.check('a.py'))
        self.assertTrue(banner.check('b.py'))
        self.assertTrue(banner.check('a.py'))
        banner.reset()
        self.assertTrue(banner.check('a.py'))

    def test_check_concurrently(self):
        banner = reporters.Banner()
        results = []
        barrier = threading.Barrier(8)

        def check():
            barrier.wait()
            results.append(banner.check('a.py'))

        threads = [threading.Thread(target=check) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual(sorted(results), [False] * 7 + [True])


class ReportTest(unittest.TestCase):

    def test_report(self):
        context, signal, logger = make_context()
        line = sys._getframe().f_lineno + 1
        failure = reporters.report(context, FailureKind.VALUE_MISMATCH, 'm1')
        reporters.report(context, FailureKind.TYPE_MISMATCH, 'm2')
        self.assertEqual(
            logger.lines,
            [
                'test_reporters.py',
                '-' * len('test_reporters.py'),
                '--- test_report in line %d: m1' % line,
                '--- test_report in line %d: m2' % (line + 1),
            ],
        )
        self.assertEqual(signal.num_calls, 2)
        self.assertEqual(
            failure,
            (
                FailureKind.VALUE_MISMATCH,
                ('test_reporters.py', 'test_report', line),
                'm1',
            ),
        )

    def test_report_banner_per_logger(self):
        context1, _, logger1 = make_context()
        context2, _, logger2 = make_context()
        reporters.report(context1, FailureKind.VALUE_MISMATCH, 'm1')
        reporters.report(context2, FailureKind.VALUE_MISMATCH, 'm2')
        self.assertEqual(len(logger1.lines), 3)
        self.assertEqual(len(logger2.lines), 3)

    def test_report_shared_banner(self):

        class PlainLogger:

            def __init__(self):
                self.lines = []

            def log(self, message):
                self.lines.append(message)

        logger = PlainLogger()
        context = expectations.AssertionContext(RecordingSignal(), logger)
        reporters.BANNER.reset()
        try:
            reporters.report(context, FailureKind.VALUE_MISMATCH, 'm1')
            reporters.report(context, FailureKind.VALUE_MISMATCH, 'm2')
            self.assertEqual(len(logger.lines), 4)
            self.assertFalse(reporters.BANNER.check('test_reporters.py'))
        finally:
            reporters.BANNER.reset()

    @preserve_defaults
    def test_report_without_banner_and_location(self):
        expectations.D['BANNER'] = False
        expectations.D['LOCATION'] = False
        context, signal, logger = make_context()
        failure = reporters.report(context, FailureKind.OUT_OF_RANGE, 'm')
        self.assertEqual(logger.lines, ['--- unknown in line 0: m'])
        self.assertIs(failure.location, locations.UNKNOWN)
        self.assertTrue(signal.has_been_called)

    def test_report_logs_debug(self):
        context, _, _ = make_context()
        with self.assertLogs(reporters.__name__, level='DEBUG') as cm:
            reporters.report(context, FailureKind.TYPE_MISMATCH, 'm')
        self.assertEqual(len(cm.output), 1)
        self.assertIn('type mismatch', cm.output[0])
        self.assertIn('test_reporters.py', cm.output[0])

    def test_recording_logger_resets_banner(self):
        logger = RecordingLogger()
        context = expectations.AssertionContext(RecordingSignal(), logger)
        reporters.report(context, FailureKind.VALUE_MISMATCH, 'm')
        logger.reset()
        reporters.report(context, FailureKind.VALUE_MISMATCH, 'm')
        self.assertEqual(len(logger.lines), 3)


if __name__ == '__main__':
    unittest.main()
