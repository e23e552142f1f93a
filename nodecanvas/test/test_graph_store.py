import random

import pytest

from nodecanvas.core.GraphStore import GraphStore
from nodecanvas.noderegistry import PrintNode, VariableNode


class TestGraphStore:

    def setup_method(self):
        self.store = GraphStore()

    def test_empty_store(self):
        assert len(self.store) == 0
        assert self.store.all() == []

    def test_add_assigns_creation_order_identifiers(self):
        a = self.store.add(VariableNode(10, 10))
        b = self.store.add(PrintNode(220, 10))
        c = self.store.add(VariableNode(10, 10))
        assert [a.identifier, b.identifier, c.identifier] == ["nd0", "nd1", "nd2"]
        assert self.store.all() == [a, b, c]

    def test_random_add_sequences(self):
        rng = random.Random(7)
        for _ in range(20):
            store = GraphStore()
            count = rng.randint(0, 12)
            for _ in range(count):
                store.create_node(rng.choice(["print", "variable"]), 0, 0)

            identifiers = [n.identifier for n in store.all()]
            assert len(store) == count
            assert len(set(identifiers)) == count
            assert identifiers == [f"nd{i}" for i in range(count)]

    def test_all_returns_snapshot(self):
        self.store.add(PrintNode(0, 0))
        snapshot = self.store.all()
        snapshot.clear()
        assert len(self.store) == 1

    def test_get(self):
        node = self.store.add(PrintNode(0, 0))
        assert self.store.get("nd0") is node
        assert self.store.get("nd9") is None

    def test_adding_same_node_twice(self):
        node = self.store.add(PrintNode(0, 0))
        with pytest.raises(ValueError, match="already in the store"):
            self.store.add(node)

    def test_create_node_by_type(self):
        node = self.store.create_node("variable", 3, 4)
        assert isinstance(node, VariableNode)
        assert node.identifier == "nd0"

    def test_resolve_links(self):
        a = self.store.add(VariableNode(0, 0))
        b = self.store.add(VariableNode(0, 0))
        p = self.store.add(PrintNode(0, 0))
        p.connect_from(b)
        p.connect_from(a)
        p.links.append("nd42")
        assert self.store.resolve_links(p) == [b, a]

    def test_iteration_in_insertion_order(self):
        nodes = [self.store.add(PrintNode(0, 0)) for _ in range(3)]
        assert list(self.store) == nodes
