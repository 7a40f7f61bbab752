"""Core chain types shared by the relay chain and its parachains."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

HASH_LENGTH = 32
U32_MAX = 2**32 - 1

BlockNumber = int
Moment = int
AccountIndex = int
ChainId = int
Nonce = int
Balance = int
Remark = bytes
DownwardMessage = bytes


def _check_block_number(value: int) -> int:
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"block number {value} is outside the 32-bit range")
    return value


@dataclass(frozen=True, order=True)
class CandidateHash:
    """A 32-byte hash that is known to be the hash of a candidate receipt."""

    hash: bytes = bytes(HASH_LENGTH)

    def __post_init__(self) -> None:
        value = bytes(self.hash)
        if len(value) != HASH_LENGTH:
            raise ValueError(
                f"candidate hash must be {HASH_LENGTH} bytes, got {len(value)}"
            )
        object.__setattr__(self, "hash", value)

    def __bytes__(self) -> bytes:
        return self.hash

    def __str__(self) -> str:
        return f"0x{self.hash[:2].hex()}…{self.hash[-2:].hex()}"

    def __repr__(self) -> str:
        return f"0x{self.hash.hex()}"


@dataclass(frozen=True)
class InboundDownwardMessage:
    """A downward message together with the block number it was sent at."""

    sent_at: BlockNumber
    msg: DownwardMessage

    def __post_init__(self) -> None:
        _check_block_number(self.sent_at)
        object.__setattr__(self, "msg", bytes(self.msg))


@dataclass(frozen=True)
class InboundHrmpMessage:
    """An HRMP message as seen by its recipient."""

    sent_at: BlockNumber
    data: bytes

    def __post_init__(self) -> None:
        _check_block_number(self.sent_at)
        object.__setattr__(self, "data", bytes(self.data))


@dataclass(frozen=True)
class OutboundHrmpMessage:
    """An HRMP message as seen by its sender."""

    recipient: Hashable
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))