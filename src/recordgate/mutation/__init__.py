"""
Mutation

Create, update, upsert and delete over ordered sequences of records.
"""

from recordgate.mutation.gateway import GatewayBacked, MutationGateway
from recordgate.mutation.memory import InMemoryMutationGateway
from recordgate.mutation.postgres import PostgresMutationGateway

__all__ = [
    "GatewayBacked",
    "InMemoryMutationGateway",
    "MutationGateway",
    "PostgresMutationGateway",
]
