from emitscope.correlation.parser import emitted_events, mask_source, parse_emissions


def test_single_emit():
    src = "function increment() public { count++; emit Incremented(count); }"

    assert parse_emissions(src) == {"increment": ["Incremented"]}


def test_nested_blocks_any_depth(counter_source):
    mapping = parse_emissions(counter_source)

    assert mapping["setNumber"] == ["Incremented", "Decremented"]
    assert mapping["increment"] == ["Incremented"]
    assert mapping["retValue"] == ["ValueReturned"]
    # view function without emits is absent
    assert "getCount" not in mapping


def test_deeply_nested_body():
    body = "emit Deep(1);"
    for _ in range(6):
        body = "if (x) { " + body + " }"
    src = f"function dive(uint x) external {{ {body} emit After(2); }}"

    assert parse_emissions(src) == {"dive": ["Deep", "After"]}


def test_duplicates_keep_first_seen_order():
    src = "function f() public { emit B(); emit A(); emit B(); }"

    assert parse_emissions(src) == {"f": ["B", "A"]}


def test_comments_and_strings_are_ignored():
    src = """
    function f() public {
        // emit Commented(1);
        /* emit Blocked(2); } */
        string memory s = "emit Quoted(3); }";
        emit Real(4);
    }
    function g() public { emit Other(); }
    """

    assert parse_emissions(src) == {"f": ["Real"], "g": ["Other"]}


def test_mask_source_preserves_offsets():
    src = 'a // x\n"b{c}" /* d\ne */ f'
    masked = mask_source(src)

    assert len(masked) == len(src)
    assert masked.count("\n") == src.count("\n")
    assert "{" not in masked
    assert masked.endswith(" f")


def test_modifiers_returns_and_no_whitespace():
    src = """
    function withdraw(uint256 amount) external onlyRole(keccak256("ADMIN")) returns (bool ok) {
        emit Withdrawn(msg.sender, amount);
    }
    function ping(){emit Pinged();}
    """

    assert parse_emissions(src) == {"withdraw": ["Withdrawn"], "ping": ["Pinged"]}


def test_bodiless_declarations_are_skipped():
    src = """
    interface ICounter {
        function increment() external;
    }
    contract Counter is ICounter {
        function increment() external override { emit Incremented(1); }
    }
    """

    assert parse_emissions(src) == {"increment": ["Incremented"]}


def test_overloads_merge():
    src = """
    function mint(address to) public { emit Minted(to); }
    function mint(address to, uint256 n) public { emit Minted(to); emit Batch(n); }
    """

    assert parse_emissions(src) == {"mint": ["Minted", "Batch"]}


def test_qualified_event_name():
    assert emitted_events("emit IEvents.Deposited(a, b);") == ["Deposited"]


def test_unbalanced_source_keeps_earlier_results():
    src = "function ok() public { emit Fine(); }\nfunction broken() public { emit Lost(); "

    assert parse_emissions(src) == {"ok": ["Fine"]}


def test_garbage_and_empty_input():
    assert parse_emissions("") == {}
    assert parse_emissions("}}}{{{ function ( emit") == {}
