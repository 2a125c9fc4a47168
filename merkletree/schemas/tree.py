"""
Tree Summary Schema

Serializable read-only snapshot of a built Merkle tree.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TreeSummary(BaseModel):
    """
    Snapshot of a Merkle tree's queryable properties.

    An empty tree is reported with no root digest, depth 0 and
    leaf count 0.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root_digest: str | None = Field(
        default=None,
        description="Chained (hex text) digest of the root node",
    )
    depth: int = Field(
        ...,
        description="Nodes on the longest root-to-leaf path",
        ge=0,
    )
    leaf_count: int = Field(
        ...,
        description="Number of leaf nodes",
        ge=0,
    )

    @field_validator("root_digest")
    @classmethod
    def validate_root_digest(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if len(v) != 64 or any(ch not in "0123456789abcdef" for ch in v):
            raise ValueError("root_digest must be 64 lowercase hex characters")
        return v

    @property
    def is_empty(self) -> bool:
        return self.root_digest is None
