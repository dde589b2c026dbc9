from pydantic import BaseModel, Field

class ProfileConfig(BaseModel):
    """Already-resolved user profile the tower proof is bound to."""
    auth_key: str                   # Hex encoded authentication key
    chain_id: int = Field(ge=0)     # Network instance (see NamedChain)
    statement: str = ""             # Free text attestation
