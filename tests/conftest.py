from typing import Any

import pytest

from emitscope.core.models import EventItem, Parameter

COUNTER_SOURCE = """\
// SPDX-License-Identifier: MIT
pragma solidity ^0.8.20;

contract Counter {
    uint256 public count;

    event Incremented(uint256 count);
    event Decremented(uint256 count);
    event ValueReturned(address indexed caller, uint256 newValue);

    function increment() public {
        count++;
        emit Incremented(count);
    }

    function setNumber(uint256 newValue) public {
        if (newValue > count) {
            for (uint256 i = 0; i < 1; i++) {
                if (newValue != 0) {
                    emit Incremented(newValue);
                }
            }
        } else {
            emit Decremented(newValue);
        }
        count = newValue;
    }

    function retValue() public returns (uint256) {
        emit ValueReturned(msg.sender, count);
        return count;
    }

    function getCount() public view returns (uint256) {
        return count;
    }
}
"""


def _fn(name: str, mutability: str, inputs: list[dict] | None = None, outputs: list[dict] | None = None) -> dict:
    return {
        "type": "function",
        "name": name,
        "inputs": inputs or [],
        "outputs": outputs or [],
        "stateMutability": mutability,
    }


def _ev(name: str, inputs: list[dict]) -> dict:
    return {"type": "event", "name": name, "inputs": inputs, "anonymous": False}


@pytest.fixture
def counter_source() -> str:
    return COUNTER_SOURCE


@pytest.fixture
def counter_abi() -> list[dict[str, Any]]:
    uint = {"name": "", "type": "uint256", "internalType": "uint256"}
    return [
        {"type": "constructor", "inputs": [], "stateMutability": "nonpayable"},
        _fn("count", "view", outputs=[uint]),
        _fn("increment", "nonpayable"),
        _fn("decrementBalance", "nonpayable"),
        _fn("setNumber", "nonpayable", inputs=[{"name": "newValue", "type": "uint256"}]),
        _fn("getCount", "view", outputs=[uint]),
        _fn("retValue", "payable", outputs=[uint]),
        _fn("double", "pure", inputs=[{"name": "x", "type": "uint256"}], outputs=[uint]),
        _ev("Incremented", [{"name": "count", "type": "uint256", "indexed": False}]),
        _ev("Decremented", [{"name": "count", "type": "uint256", "indexed": False}]),
        _ev(
            "ValueReturned",
            [
                {"name": "caller", "type": "address", "indexed": True},
                {"name": "newValue", "type": "uint256", "indexed": False},
            ],
        ),
        {"type": "error", "name": "Overflow", "inputs": []},
    ]


@pytest.fixture
def incremented() -> EventItem:
    return EventItem(name="Incremented", inputs=(Parameter(type="uint256", name="count"),))


@pytest.fixture
def value_returned() -> EventItem:
    return EventItem(
        name="ValueReturned",
        inputs=(
            Parameter(type="address", name="caller", indexed=True),
            Parameter(type="uint256", name="newValue"),
        ),
    )


@pytest.fixture
def paused() -> EventItem:
    return EventItem(name="Paused", inputs=(Parameter(type="bool", name="flag"),))
