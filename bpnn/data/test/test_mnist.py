import os
import shutil
import tempfile
import unittest

import numpy as np

from bpnn.data import mnist


class TestParseRecord(unittest.TestCase):

    def test_parse_record(self):
        label, values = mnist.parse_record("1,255,16,100")

        self.assertEqual(label, 1)
        expected = np.r_[1.0, 0.07211764705882352, 0.3982352941176471]
        self.assertLessEqual(np.abs(values - expected).max(), 1e-12)

    def test_scaled_range(self):
        _, values = mnist.parse_record("3,0,255,127\n")
        self.assertAlmostEqual(values[0], 0.01)
        self.assertAlmostEqual(values[1], 1.0)
        self.assertTrue(((values >= 0.01) & (values <= 1.0 + 1e-12)).all())

    def test_malformed_records(self):
        for line in ["", "7", "1,2,x", "-1,0,0", "1.5,0,0", "1,nan,0"]:
            with self.assertRaises(ValueError):
                mnist.parse_record(line)

    def test_error_names_line_number(self):
        with self.assertRaisesRegex(ValueError, "line 12"):
            mnist.parse_record("a,1,2", line_number=12)


class TestOneHot(unittest.TestCase):

    def test_one_hot(self):
        targets = mnist.one_hot(2, 4)
        self.assertEqual(targets.tolist(), [0.01, 0.01, 0.99, 0.01])

    def test_custom_bounds(self):
        targets = mnist.one_hot(0, 2, low=0.0, high=1.0)
        self.assertEqual(targets.tolist(), [1.0, 0.0])

    def test_label_out_of_range(self):
        with self.assertRaises(ValueError):
            mnist.one_hot(10, 10)
        with self.assertRaises(ValueError):
            mnist.one_hot(-1, 10)


class TestIterRecords(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.tmp_dir, 'records.csv')
        with open(self.path, 'w') as f:
            f.write("0,0,255\n\n1,255,0\n")

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def test_iter_records_skips_blank_lines(self):
        records = list(mnist.iter_records(self.path))

        self.assertEqual([label for label, _ in records], [0, 1])
        self.assertAlmostEqual(records[0][1][1], 1.0)

    def test_iter_examples(self):
        examples = list(mnist.iter_examples(self.path, n_classes=2))

        label, inputs, targets = examples[1]
        self.assertEqual(label, 1)
        self.assertEqual(len(inputs), 2)
        self.assertEqual(targets.tolist(), [0.01, 0.99])

    def test_bad_line_reports_file_line(self):
        with open(self.path, 'a') as f:
            f.write("2,oops,0\n")

        with self.assertRaisesRegex(ValueError, "line 4"):
            list(mnist.iter_records(self.path))


if __name__ == '__main__':
    unittest.main()
