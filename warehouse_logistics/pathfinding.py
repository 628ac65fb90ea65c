"""A* pathfinding on a routing graph."""

from __future__ import annotations

import heapq

from .graph import Graph, Scorer, TileNode, UniformScorer


def astar(
    graph: Graph,
    start: str,
    goal: str,
    next_node_scorer: Scorer[TileNode],
    target_scorer: Scorer[TileNode] | None = None,
) -> list[TileNode] | None:
    """A* from node id *start* to node id *goal*.

    *next_node_scorer* prices each step; *target_scorer* estimates the
    remaining cost to *goal*. It must never overestimate that cost, or the
    route may not be the cheapest; with no *target_scorer* the estimate is 0
    and the search is Dijkstra's.
    Returns the nodes from *start* to *goal* inclusive, or ``None`` if no path.
    Unknown ids raise ``NodeNotFoundError``.
    """
    if target_scorer is None:
        target_scorer = UniformScorer(0.0)

    start_node = graph.get_node(start)
    goal_node = graph.get_node(goal)

    def h(node: TileNode) -> float:
        return target_scorer.compute_cost(node, goal_node)

    counter = 0
    open_set: list[tuple[float, int, str]] = [(h(start_node), counter, start)]
    came_from: dict[str, str] = {}
    g_score: dict[str, float] = {start: 0.0}

    while open_set:
        _, _, current = heapq.heappop(open_set)

        if current == goal:
            path_ids: list[str] = [current]
            while current in came_from:
                current = came_from[current]
                path_ids.append(current)
            path_ids.reverse()
            return [graph.get_node(nid) for nid in path_ids]

        current_node = graph.get_node(current)
        for neighbor in sorted(graph.get_connections(current_node), key=lambda n: n.id):
            tentative_g = g_score[current] + next_node_scorer.compute_cost(
                current_node, neighbor,
            )
            if tentative_g < g_score.get(neighbor.id, float("inf")):
                came_from[neighbor.id] = current
                g_score[neighbor.id] = tentative_g
                counter += 1
                heapq.heappush(open_set, (tentative_g + h(neighbor), counter, neighbor.id))

    return None
