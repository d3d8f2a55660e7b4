import unittest

from zabbix_jsonrpc.params import get_request_params, is_positional


class GetRequestParamsTestCase(unittest.TestCase):
    def test_absent_is_empty_list(self) -> None:
        self.assertEqual(get_request_params(None), [])
        self.assertEqual(get_request_params(), [])

    def test_absent_takes_defaults(self) -> None:
        self.assertEqual(get_request_params(None, {"output": "extend"}), {"output": "extend"})

    def test_scalars_are_wrapped(self) -> None:
        for value in ("10084", 10084, 1.5, True):
            with self.subTest(value=value):
                self.assertEqual(get_request_params(value), [value])
                self.assertEqual(get_request_params(value, {"output": "extend"}), [value])

    def test_positional_list_skips_defaults(self) -> None:
        defaults = {"output": "extend"}
        self.assertEqual(get_request_params([1, 2, 3], defaults), [1, 2, 3])
        self.assertEqual(get_request_params(("1", "2"), defaults), ["1", "2"])

    def test_integer_keyed_mapping_is_positional(self) -> None:
        params = {0: "10084", 1: "10085"}
        self.assertEqual(get_request_params(params, {"output": "extend"}), ["10084", "10085"])

    def test_out_of_order_integer_keys_are_keyed(self) -> None:
        params = {1: "a", 0: "b"}
        self.assertFalse(is_positional(params))
        self.assertEqual(get_request_params(params), {1: "a", 0: "b"})

    def test_mapping_merges_defaults_caller_wins(self) -> None:
        defaults = {"output": "extend", "limit": 10}
        merged = get_request_params({"limit": 5, "hostids": ["1"]}, defaults)
        self.assertEqual(merged, {"output": "extend", "limit": 5, "hostids": ["1"]})
        self.assertEqual(defaults, {"output": "extend", "limit": 10})

    def test_empty_collections(self) -> None:
        self.assertEqual(get_request_params({}), {})
        self.assertEqual(get_request_params([]), [])
        self.assertEqual(get_request_params([], {"output": "extend"}), {"output": "extend"})
        self.assertEqual(get_request_params({}, {"output": "extend"}), {"output": "extend"})


if __name__ == "__main__":
    unittest.main()
