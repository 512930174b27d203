from algodrills.trie import Trie, suggested_products


def test_trie_example_sequence():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("apple") is True
    assert trie.search("app") is False
    assert trie.starts_with("app") is True
    trie.insert("app")
    assert trie.search("app") is True


def test_trie_missing_words():
    trie = Trie()
    trie.insert("banana")
    assert trie.search("band") is False
    assert trie.starts_with("bana") is True
    assert trie.starts_with("bar") is False
    assert trie.search("bananas") is False


def test_trie_empty_word():
    trie = Trie()
    assert trie.starts_with("") is True
    assert trie.search("") is False
    trie.insert("")
    assert trie.search("") is True


def test_suggested_products_example():
    products = ["mobile", "mouse", "moneypot", "monitor", "mousepad"]
    assert suggested_products(products, "mouse") == [
        ["mobile", "moneypot", "monitor"],
        ["mobile", "moneypot", "monitor"],
        ["mouse", "mousepad"],
        ["mouse", "mousepad"],
        ["mouse", "mousepad"],
    ]


def test_suggested_products_invariants():
    products = ["bags", "baggage", "banner", "box", "cloths", "bag", "ban"]
    word = "bags"
    result = suggested_products(products, word)
    assert len(result) == len(word)
    for end, group in enumerate(result, start=1):
        assert len(group) <= 3
        assert group == sorted(group)
        assert all(item.startswith(word[:end]) for item in group)


def test_suggested_products_no_match():
    result = suggested_products(["havana"], "tatiana")
    assert result == [[] for _ in "tatiana"]