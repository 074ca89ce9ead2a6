"""Graph algorithms over the import graph.

Mutual imports are valid; cycles are reported, never rejected.
"""

from dataclasses import dataclass

from .models import DependencyGraph


@dataclass
class CycleGroup:
    """A strongly connected component with more than one file."""

    files: list[str]  # relative paths, sorted
    internal_edge_count: int = 0


def tarjan_scc(adjacency: dict[int, list[int]]) -> list[set[int]]:
    """Tarjan's algorithm for strongly connected components (iterative).

    Uses an explicit call stack to avoid Python recursion limits on deep
    import chains. Roots are visited in adjacency order so the result is
    deterministic for a deterministic graph.
    """
    counter = 0
    scc_stack: list[int] = []
    on_stack: set[int] = set()
    index: dict[int, int] = {}
    lowlink: dict[int, int] = {}
    result: list[set[int]] = []

    for root in adjacency:
        if root in index:
            continue

        # Explicit call stack: each frame is (node, neighbor_iterator)
        index[root] = lowlink[root] = counter
        counter += 1
        scc_stack.append(root)
        on_stack.add(root)
        call_stack: list[tuple] = [(root, iter(adjacency.get(root, [])))]

        while call_stack:
            v, it = call_stack[-1]
            pushed = False
            for w in it:
                if w not in index:
                    index[w] = lowlink[w] = counter
                    counter += 1
                    scc_stack.append(w)
                    on_stack.add(w)
                    call_stack.append((w, iter(adjacency.get(w, []))))
                    pushed = True
                    break
                elif w in on_stack:
                    lowlink[v] = min(lowlink[v], index[w])

            if not pushed:
                call_stack.pop()
                if call_stack:
                    caller = call_stack[-1][0]
                    lowlink[caller] = min(lowlink[caller], lowlink[v])

                if lowlink[v] == index[v]:
                    component: set[int] = set()
                    while True:
                        w = scc_stack.pop()
                        on_stack.discard(w)
                        component.add(w)
                        if w == v:
                            break
                    result.append(component)

    return result


def find_cycles(graph: DependencyGraph) -> list[CycleGroup]:
    """Import cycles of the graph, largest first."""
    adjacency = graph.adjacency()
    cycles: list[CycleGroup] = []

    for component in tarjan_scc(adjacency):
        if len(component) < 2:
            continue
        internal = sum(1 for v in component for w in adjacency[v] if w in component)
        cycles.append(
            CycleGroup(
                files=sorted(graph.get_file(v).rel_path for v in component),
                internal_edge_count=internal,
            )
        )

    cycles.sort(key=lambda c: (-len(c.files), c.files))
    return cycles
