"""Game domain services: ticket generation, win evaluation and the
session coordinator.

Everything here is free of transport concerns; socket handlers and HTTP
routes call into the coordinator and deliver the messages it returns.
"""
