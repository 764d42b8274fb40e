import json
from pathlib import Path

from emitscope import (
    categorize,
    correlate_interface,
    dataset_name,
    describe_emissions,
    extract_contract_name,
    generate_analytical_queries,
    parse_interface,
)

EXAMPLES_ROOT = Path(__file__).parent
assert EXAMPLES_ROOT.name == "examples"

SOURCE = """
contract Counter {
    uint256 public count;
    event Incremented(uint256 count);
    event Decremented(uint256 count);

    function increment() public {
        count++;
        emit Incremented(count);
    }

    function decrement() public {
        count--;
        emit Decremented(count);
    }

    function reset() public {
        count = 0;
    }
}
"""

# As returned by the deployer for the source above
ABI = json.loads(
    """
[
  {"type": "function", "name": "count", "inputs": [], "outputs": [{"name": "", "type": "uint256"}], "stateMutability": "view"},
  {"type": "function", "name": "increment", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
  {"type": "function", "name": "decrement", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
  {"type": "function", "name": "reset", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
  {"type": "event", "name": "Incremented", "inputs": [{"name": "count", "type": "uint256", "indexed": false}], "anonymous": false},
  {"type": "event", "name": "Decremented", "inputs": [{"name": "count", "type": "uint256", "indexed": false}], "anonymous": false}
]
"""
)
ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


def main():
    categorized = categorize(parse_interface(ABI))

    emissions = correlate_interface(SOURCE, categorized)
    write_names = [fn.name for fn in categorized.write_functions]
    for fn, status in describe_emissions(emissions, write_names).items():
        print(f"{fn:12s} {status.value:8s} {emissions.get(fn, [])}")

    dataset = dataset_name(extract_contract_name(SOURCE))
    for query in generate_analytical_queries(categorized.events, dataset, ADDRESS):
        print("\n-- " + query.name)
        print(query.query_text)


if __name__ == "__main__":
    main()
