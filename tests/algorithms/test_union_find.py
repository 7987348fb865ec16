from ridematch.algorithms.union_find import UnionFind


class TestUnionFind:
    def test_singletons(self):
        uf = UnionFind(["A", "B", "C"])
        assert len(uf) == 3
        assert uf.component_count == 3
        assert uf.find("A") == "A"
        assert not uf.connected("A", "B")

    def test_find_is_idempotent(self):
        uf = UnionFind(["A", "B", "C"])
        uf.union("A", "B")
        uf.union("B", "C")
        root = uf.find("C")
        assert uf.find("C") == root
        assert uf.find("A") == root
        assert uf.find("B") == root

    def test_union_self_is_noop(self):
        uf = UnionFind(["A"])
        assert uf.union("A", "A") is False
        assert uf.component_count == 1

    def test_union_reports_cycle(self):
        uf = UnionFind(["A", "B", "C"])
        assert uf.union("A", "B") is True
        assert uf.union("B", "C") is True
        assert uf.union("C", "A") is False
        assert uf.component_count == 1

    def test_union_by_rank(self):
        """Equal ranks put the second root under the first and grow its rank."""
        uf = UnionFind(["A", "B", "C"])
        uf.union("A", "B")
        # Equal ranks: second root goes under the first
        assert uf.parent["B"] == "A"
        assert uf.rank["A"] == 1
        uf.union("C", "A")
        # Lower-rank root goes under the higher-rank root
        assert uf.parent["C"] == "A"
        assert uf.rank["A"] == 1

    def test_path_compression(self):
        """find() points every node on the walked path straight at the root."""
        uf = UnionFind(["A", "B", "C", "D"])
        # Hand-built chain D -> C -> B -> A
        uf.parent.update({"B": "A", "C": "B", "D": "C"})
        assert uf.find("D") == "A"
        assert uf.parent["D"] == "A"
        assert uf.parent["C"] == "A"
        assert uf.parent["B"] == "A"

    def test_lazy_registration(self):
        uf = UnionFind()
        assert "X" not in uf
        assert uf.find("X") == "X"
        assert "X" in uf
        assert uf.component_count == 1
        assert uf.union("X", "Y") is True
        assert len(uf) == 2
        assert uf.connected("X", "Y")
