import doctest
import unittest

import leftheap

from .. import heap, node, pipes


class DoctestTests(unittest.TestCase):
    def test_modules(self):
        for module in (leftheap, heap, node, pipes):
            with self.subTest(module=module.__name__):
                failed, attempted = doctest.testmod(module)
                self.assertGreater(attempted, 0)
                self.assertEqual(failed, 0)
