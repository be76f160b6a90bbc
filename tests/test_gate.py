"""Tests for condition/gate.py."""

import unittest
from unittest.mock import patch

from condition.allow_list import MANAGE_SELECTORS_PERMISSION_ID, AllowList
from condition.decoder import Action, encode_execute_call
from condition.gate import BatchGate, Evaluation, Reason
from condition.selectors import EXECUTE_SELECTOR

DAO = "0x" + "44" * 20
MEMBER = "0x" + "55" * 20
ADMIN = "0x" + "11" * 20
TARGET = "0x" + "33" * 20
PROPOSAL_ID = b"\x07" * 32
PERMISSION_ID = b"\x09" * 32

SEL_A = bytes.fromhex("aaaaaaaa")
SEL_B = bytes.fromhex("bbbbbbbb")
SEL_C = bytes.fromhex("cccccccc")


def action(selector: bytes, args: bytes = b"\x00" * 32) -> Action:
    return Action(TARGET, 0, selector + args)


def execute_payload(*actions: Action) -> bytes:
    return encode_execute_call(PROPOSAL_ID, actions)


class GateTestCase(unittest.TestCase):
    def setUp(self):
        self.allow_list = AllowList(lambda caller: caller == ADMIN, [SEL_A, SEL_B])
        self.gate = BatchGate(self.allow_list)

    def granted(self, data) -> bool:
        return self.gate.is_granted(DAO, MEMBER, PERMISSION_ID, data)


class TestScenario(GateTestCase):
    def test_all_allowed(self):
        self.assertTrue(self.granted(execute_payload(action(SEL_A), action(SEL_B))))

    def test_appended_foreign_selector(self):
        self.assertFalse(self.granted(execute_payload(action(SEL_A), action(SEL_B), action(SEL_C))))

    def test_selector_without_arguments(self):
        self.assertTrue(self.granted(execute_payload(action(SEL_A, b""))))

    def test_empty_batch_is_permitted(self):
        self.assertTrue(self.granted(execute_payload()))

    def test_empty_batch_with_empty_allow_list(self):
        gate = BatchGate(AllowList(lambda caller: False))
        self.assertTrue(gate.is_granted(DAO, MEMBER, PERMISSION_ID, execute_payload()))

    def test_permission_arguments_are_ignored(self):
        payload = execute_payload(action(SEL_A))
        self.assertTrue(self.gate.is_granted(None, None, None, payload))
        self.assertTrue(self.gate.is_granted(DAO, ADMIN, MANAGE_SELECTORS_PERMISSION_ID, payload))


    def test_evaluation_carries_decoded_request(self):
        result = self.gate.evaluate(execute_payload(action(SEL_A), action(SEL_B)))
        self.assertEqual(result.request.proposal_id, PROPOSAL_ID)
        self.assertEqual([a.selector for a in result.request.actions], [SEL_A, SEL_B])

    def test_denied_evaluation_carries_decoded_request(self):
        result = self.gate.evaluate(execute_payload(action(SEL_C)))
        self.assertFalse(result.permitted)
        self.assertEqual(len(result.request.actions), 1)


class TestAtomicDenial(GateTestCase):
    def assert_denied_at(self, index: int, size: int = 5):
        actions = [action(SEL_A if i % 2 else SEL_B) for i in range(size)]
        actions[index] = action(SEL_C)
        payload = execute_payload(*actions)

        self.assertFalse(self.granted(payload))
        result = self.gate.evaluate(payload)
        self.assertEqual(result.reason, Reason.SELECTOR_NOT_ALLOWED)
        self.assertEqual(result.action_index, index)
        self.assertEqual(result.selector, SEL_C)

    def test_first_action(self):
        self.assert_denied_at(0)

    def test_last_action(self):
        self.assert_denied_at(4)

    def test_interior_action(self):
        self.assert_denied_at(2)

    def test_first_failure_reported(self):
        result = self.gate.evaluate(execute_payload(action(SEL_A), action(SEL_C), action(b"\xdd" * 4)))
        self.assertEqual(result.action_index, 1)


class TestJurisdiction(GateTestCase):
    def test_foreign_outer_selector(self):
        body = execute_payload(action(SEL_A), action(SEL_B))[4:]
        payload = b"\xde\xad\xbe\xef" + body
        self.assertFalse(self.granted(payload))
        result = self.gate.evaluate(payload)
        self.assertEqual(result.reason, Reason.NOT_EXECUTE_CALL)
        self.assertEqual(result.selector, b"\xde\xad\xbe\xef")

    def test_allowed_selector_as_outer_call(self):
        self.assertFalse(self.granted(SEL_A + b"\x00" * 32))

    def test_empty_payload(self):
        self.assertFalse(self.granted(b""))
        self.assertEqual(self.gate.evaluate(b"").reason, Reason.NOT_EXECUTE_CALL)


class TestFailClosed(GateTestCase):
    def test_truncated_payload(self):
        payload = execute_payload(action(SEL_A))
        for cut in (4, 40, 100, len(payload) - 64):
            with self.subTest(cut=cut):
                self.assertFalse(self.granted(payload[:cut]))

    def test_malformed_reason(self):
        result = self.gate.evaluate(EXECUTE_SELECTOR + b"\xff" * 100)
        self.assertEqual(result, Evaluation(False, Reason.MALFORMED_PAYLOAD))
        self.assertIsNone(result.request)

    def test_not_bytes(self):
        self.assertFalse(self.granted(None))
        self.assertFalse(self.granted("0xdeadbeef"))
        self.assertFalse(self.granted(12345))

    def test_unexpected_error_denies(self):
        with patch.object(self.gate, "evaluate", side_effect=RuntimeError("boom")):
            self.assertFalse(self.granted(execute_payload()))


class TestShortActionData(GateTestCase):
    def test_empty_data_denied(self):
        result = self.gate.evaluate(execute_payload(action(SEL_A), Action(TARGET, 1, b"")))
        self.assertFalse(result.permitted)
        self.assertEqual(result.reason, Reason.MISSING_SELECTOR)
        self.assertEqual(result.action_index, 1)

    def test_short_data_denied_even_with_zero_selector_allowed(self):
        self.allow_list.allow(ADMIN, b"\x00\x00\x00\x00")
        self.assertFalse(self.granted(execute_payload(Action(TARGET, 0, b"\x00\x00"))))
        self.assertTrue(self.granted(execute_payload(Action(TARGET, 0, b"\x00\x00\x00\x00"))))


class TestAllowListInteraction(GateTestCase):
    def test_evaluation_does_not_mutate(self):
        before = list(self.allow_list)
        self.granted(execute_payload(action(SEL_C)))
        self.granted(execute_payload(action(SEL_A)))
        self.assertEqual(list(self.allow_list), before)

    def test_sees_latest_allow_list(self):
        payload = execute_payload(action(SEL_A), action(SEL_C))
        self.assertFalse(self.granted(payload))
        self.allow_list.allow(ADMIN, SEL_C)
        self.assertTrue(self.granted(payload))
        self.allow_list.disallow(ADMIN, SEL_A)
        self.assertFalse(self.granted(payload))


if __name__ == "__main__":
    unittest.main()
