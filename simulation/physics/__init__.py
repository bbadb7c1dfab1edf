"""Plant models driven by the closed-loop simulation.

Modules:
    base: PlantModel interface shared by every plant
    first_order_lag: Generic first-order lag (Tau, K) response
    reactive_power: Inductive/capacitive network seen from the point of connection
"""
