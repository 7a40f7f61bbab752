import pytest

from paraledger.primitives import (
    CandidateHash,
    InboundDownwardMessage,
    InboundHrmpMessage,
    OutboundHrmpMessage,
)


def test_default_candidate_hash_is_zero():
    assert CandidateHash().hash == bytes(32)
    assert bytes(CandidateHash()) == bytes(32)


@pytest.mark.parametrize("length", [0, 31, 33])
def test_candidate_hash_rejects_wrong_length(length):
    with pytest.raises(ValueError):
        CandidateHash(bytes(length))


def test_candidate_hash_display_is_abbreviated():
    h = CandidateHash(bytes(range(32)))
    assert str(h) == "0x0001…1e1f"


def test_candidate_hash_repr_is_full_hex():
    h = CandidateHash(bytes(range(32)))
    text = repr(h)
    assert text.startswith("0x000102")
    assert len(text) == 2 + 64
    assert bytes.fromhex(text[2:]) == h.hash


def test_candidate_hash_ordering_and_hashing():
    low = CandidateHash()
    high = CandidateHash(b"\x01" + bytes(31))
    assert sorted([high, low]) == [low, high]
    assert len({low, CandidateHash(bytes(32)), high}) == 2


def test_downward_message_coerces_payload():
    message = InboundDownwardMessage(sent_at=5, msg=bytearray(b"abc"))
    assert message.msg == b"abc"
    assert message == InboundDownwardMessage(5, b"abc")


def test_messages_reject_out_of_range_block_number():
    with pytest.raises(ValueError):
        InboundDownwardMessage(sent_at=-1, msg=b"")
    with pytest.raises(ValueError):
        InboundHrmpMessage(sent_at=2**32, data=b"")


def test_outbound_message_is_hashable():
    first = OutboundHrmpMessage(recipient=2000, data=[1, 2])
    second = OutboundHrmpMessage(recipient=2000, data=b"\x01\x02")
    assert first == second
    assert len({first, second}) == 1