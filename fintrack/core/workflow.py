from enum import Enum

class DerivationStage(str, Enum):
    LOAD = "LOAD"
    INGEST = "INGEST"
    DERIVE = "DERIVE"
    RENDER = "RENDER"
    WRITE = "WRITE"
