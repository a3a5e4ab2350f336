def sanity_check_graph(start, neighbors, max_nodes: int = 10_000):
    """Walks nodes breadth-first and checks cost_to never returns None or a negative cost."""
    from collections import deque
    seen = set()
    q = deque([start])
    steps = 0
    edges = 0
    while q and steps < max_nodes:
        n = q.popleft()
        if n in seen:
            continue
        seen.add(n)
        for n2 in neighbors(n):
            cost = n.cost_to(n2)
            if cost is None:
                raise AssertionError(f"cost_to is None for ({n!r} -> {n2!r})")
            if cost < 0:
                raise AssertionError(f"negative cost {cost} for ({n!r} -> {n2!r}); A* optimality needs costs >= 0")
            edges += 1
            q.append(n2)
        steps += 1
    return f"OK: visited {len(seen)} nodes, {edges} edges; no None or negative costs."
