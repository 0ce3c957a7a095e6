"""Network Bounded Context.

Responsible for the antenna adjacency graph:
- Entities: Vertex, AntennaGraph
- Services: depth_first, breadth_first
"""
