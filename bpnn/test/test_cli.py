import logging
import os
import shutil
import tempfile
import unittest

import numpy as np

from bpnn import cli


def write_records(path, random_state, n_per_class):
    """ Two separable classes: bright left half (label 0) or bright right
    half (label 1)
    """
    with open(path, 'w') as f:
        for _ in range(n_per_class):
            for label in (0, 1):
                pixels = random_state.randint(0, 40, size=4)
                if label == 0:
                    pixels[:2] += 200
                else:
                    pixels[2:] += 200
                f.write(",".join(str(v) for v in [label] + list(pixels)))
                f.write("\n")


class TestCli(unittest.TestCase):

    def setUp(self):
        self.random_state = np.random.RandomState(1234)
        self.tmp_dir = tempfile.mkdtemp()
        self.train_file = os.path.join(self.tmp_dir, 'train.csv')
        self.test_file = os.path.join(self.tmp_dir, 'test.csv')
        self.log_file = os.path.join(self.tmp_dir, 'log.txt')

        write_records(self.train_file, self.random_state, n_per_class=20)
        write_records(self.test_file, self.random_state, n_per_class=5)

    def tearDown(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        shutil.rmtree(self.tmp_dir)

    def _argv(self, *extra):
        return [self.train_file, self.test_file,
                '--input-nodes', '4', '--hidden', '4',
                '--output-nodes', '2', '--learning-rate', '0.3',
                '--seed', '0', '--log-file', self.log_file,
                '--quiet'] + list(extra)

    def test_run_learns_separable_data(self):
        args = cli.parse_args(self._argv('--epochs', '30'))
        cli.setup_logging(filename=self.log_file, stdout=False)

        score = cli.run(args)

        self.assertGreaterEqual(score, 0.9)

    def test_main_writes_log(self):
        status = cli.main(self._argv('--epochs', '2', '--progress-every',
                                     '10'))
        self.assertEqual(status, 0)

        with open(self.log_file) as f:
            log = f.read()

        self.assertIn("Accuracy", log)
        self.assertIn("trained on 10 records", log)
        self.assertIn("(2 / 2) epochs complete", log)
        self.assertIn("Finish!", log)

    def test_main_reports_shape_error(self):
        argv = self._argv()
        argv[argv.index('--input-nodes') + 1] = '5'

        self.assertEqual(cli.main(argv), 1)

        with open(self.log_file) as f:
            self.assertIn("ERROR", f.read())

    def test_main_reports_missing_file(self):
        argv = self._argv()
        argv[0] = os.path.join(self.tmp_dir, 'missing.csv')

        self.assertEqual(cli.main(argv), 1)


if __name__ == '__main__':
    unittest.main()
