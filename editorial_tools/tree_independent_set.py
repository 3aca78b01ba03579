import sys
import typer
import numpy as np
from abc import ABC
from pathlib import Path

app = typer.Typer(help="Maximum independent set on a tree with include/exclude dynamic programming.")

BRUTE_FORCE_LIMIT = 20

class InvalidTreeError(ValueError):
    pass

class Tree:
    def __init__(self, n):
        if n < 1:
            raise InvalidTreeError(f"A tree needs at least one node, got n={n}.")
        self.n = n
        self.adj = [[] for _ in range(n + 1)]

    def add_edge(self, u, v):
        for node in (u, v):
            if not 1 <= node <= self.n:
                raise InvalidTreeError(f"Node {node} is outside the range 1..{self.n}.")
        if u == v:
            raise InvalidTreeError(f"Self-loop on node {u}.")
        self.adj[u].append(v)
        self.adj[v].append(u)

    @classmethod
    def from_edges(cls, n, edges):
        tree = cls(n)
        edges = list(edges)
        if len(edges) != n - 1:
            raise InvalidTreeError(f"A tree on {n} nodes has {n - 1} edges, got {len(edges)}.")
        for u, v in edges:
            tree.add_edge(u, v)
        return tree

class TreeDPBase(ABC):
    def postorder(self, tree, root):
        """Iterative post-order from root; returns (order, parent)."""
        if not 1 <= root <= tree.n:
            raise InvalidTreeError(f"Root {root} is outside the range 1..{tree.n}.")
        parent = [0] * (tree.n + 1)
        visited = [False] * (tree.n + 1)
        order = []
        stack = [(root, False)]
        visited[root] = True
        while stack:
            u, expanded = stack.pop()
            if expanded:
                order.append(u)
                continue
            stack.append((u, True))
            for v in tree.adj[u]:
                if v == parent[u]:
                    continue
                if visited[v]:
                    raise InvalidTreeError(f"Edge {u}-{v} closes a cycle.")
                visited[v] = True
                parent[v] = u
                stack.append((v, False))
        if len(order) != tree.n:
            raise InvalidTreeError(f"Edges do not connect all {tree.n} nodes (reached {len(order)}).")
        return order, parent

class TreeIndependentSet(TreeDPBase):
    def __init__(self):
        self.dp = None
        self.parent = None
        self.order = None
        self.tree = None
        self.root = None

    def run(self, n, edges, root=1):
        tree = Tree.from_edges(n, edges)
        order, parent = self.postorder(tree, root)
        dp = np.zeros((n + 1, 2), dtype=np.int64)
        for u in order:
            dp[u][0] = 0
            dp[u][1] = 1
            for v in tree.adj[u]:
                if v == parent[u]:
                    continue
                dp[u][1] += dp[v][0]
                dp[u][0] += max(dp[v][0], dp[v][1])
        self.tree, self.root = tree, root
        self.dp, self.parent, self.order = dp, parent, order
        return int(max(dp[root][0], dp[root][1]))

    def chosen_nodes(self):
        if self.dp is None:
            raise RuntimeError("run() must be called before chosen_nodes().")
        dp, parent = self.dp, self.parent
        taken = [False] * (self.tree.n + 1)
        # parents come before children in reversed post-order
        for u in reversed(self.order):
            if u != self.root and taken[parent[u]]:
                continue
            taken[u] = dp[u][1] >= dp[u][0]
        return [u for u in range(1, self.tree.n + 1) if taken[u]]

class BruteForceIndependentSet(TreeDPBase):
    def __init__(self):
        self.best_set = None

    def run(self, n, edges, root=1):
        if n > BRUTE_FORCE_LIMIT:
            raise ValueError(f"Exhaustive search is limited to {BRUTE_FORCE_LIMIT} nodes, got n={n}.")
        tree = Tree.from_edges(n, edges)
        self.postorder(tree, root)
        edge_masks = [(1 << (u - 1)) | (1 << (v - 1)) for u in range(1, n + 1) for v in tree.adj[u] if u < v]
        best = 0
        best_mask = 0
        for mask in range(1 << n):
            if any(mask & e == e for e in edge_masks):
                continue
            size = bin(mask).count("1")
            if size > best:
                best, best_mask = size, mask
        self.best_set = [u for u in range(1, n + 1) if best_mask >> (u - 1) & 1]
        return best

    def chosen_nodes(self):
        if self.best_set is None:
            raise RuntimeError("run() must be called before chosen_nodes().")
        return self.best_set

def parse_tree_input(content):
    tokens = content.split()
    if not tokens:
        raise InvalidTreeError("Input is empty; expected the node count n.")
    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            raise InvalidTreeError(f"Expected an integer, got '{token}'.")
    n = values[0]
    if n < 1:
        raise InvalidTreeError(f"A tree needs at least one node, got n={n}.")
    expected = 1 + 2 * (n - 1)
    if len(values) < expected:
        raise InvalidTreeError(f"Expected {n - 1} edges ({expected - 1} integers), got {len(values) - 1} integers.")
    if len(values) > expected:
        raise InvalidTreeError(f"Unexpected trailing input after {n - 1} edges.")
    edges = [(values[i], values[i + 1]) for i in range(1, expected, 2)]
    return n, edges

@app.command("solve")
def solve(
    file: str = typer.Argument(None, help="File with n followed by n-1 edges (reads stdin if omitted)"),
    root: int = typer.Option(1, "--root", "-r", help="Node to root the traversal at"),
    show_set: bool = typer.Option(False, "--show-set", help="Also print one optimal set of nodes."),
    brute_force: bool = typer.Option(False, "--brute-force", help=f"Use exhaustive search (n <= {BRUTE_FORCE_LIMIT})."),
):
    if file:
        file_path = Path(file)
        if not file_path.exists():
            typer.echo(f"Error: File '{file}' not found.", err=True)
            raise typer.Exit(code=1)
        content = file_path.read_text(encoding="utf-8")
    else:
        content = sys.stdin.read()

    solver = BruteForceIndependentSet() if brute_force else TreeIndependentSet()
    try:
        n, edges = parse_tree_input(content)
        answer = solver.run(n, edges, root=root)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(str(answer))
    if show_set:
        typer.echo("Chosen nodes: " + " ".join(str(u) for u in solver.chosen_nodes()))

if __name__ == "__main__":
    app()
