"""Resource Schemas — Pydantic models with field-level rules for create/update bodies.

Invariants:
    - Id references are strict positive ints (booleans and numeric strings rejected)
    - Required strings are non-empty
    - Review.rating ∈ [1, 5]; CartItem.quantity ≥ 1; price, stock, totalPrice ≥ 0
    - Cart.products is a non-empty list
    - Server-derived fields (id, slug, createdAt, updatedAt) are not declared —
      unknown keys are ignored, except on users which keep extra profile fields

Design Decisions:
    - Strict per-field types instead of a model-wide strict config: "price" must
      still accept ints for a float field
    - The same model serves POST (full) and PUT (partial) — partial validation
      drops "missing" errors in core.payload_validation
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

RecordRef = Annotated[int, Field(strict=True, ge=1)]
NonEmptyStr = Annotated[str, Field(strict=True, min_length=1)]
NonNegativeFloat = Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False)]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]


class UserCreate(BaseModel):
    """User — extra profile fields (phone, website, company) are kept."""
    model_config = ConfigDict(extra="allow")

    name: NonEmptyStr
    username: NonEmptyStr
    email: NonEmptyStr
    address: dict[str, Any] | str | None = None


class PostCreate(BaseModel):
    userId: RecordRef
    title: NonEmptyStr
    body: NonEmptyStr
    tags: list[Annotated[str, Field(strict=True)]] = Field(default_factory=list)
    category: NonEmptyStr | None = None


class CommentCreate(BaseModel):
    postId: RecordRef
    userId: RecordRef
    body: NonEmptyStr


class AlbumCreate(BaseModel):
    userId: RecordRef
    title: NonEmptyStr


class PhotoCreate(BaseModel):
    albumId: RecordRef
    title: NonEmptyStr
    url: NonEmptyStr
    thumbnailUrl: NonEmptyStr


class TodoCreate(BaseModel):
    userId: RecordRef
    title: NonEmptyStr
    completed: Annotated[bool, Field(strict=True)] = False


class ProductCreate(BaseModel):
    title: NonEmptyStr
    description: NonEmptyStr
    price: NonNegativeFloat
    image: NonEmptyStr
    category: NonEmptyStr
    stock: NonNegativeInt


class CategoryCreate(BaseModel):
    name: NonEmptyStr
    description: NonEmptyStr


class TagCreate(BaseModel):
    name: NonEmptyStr


class CartItem(BaseModel):
    productId: RecordRef
    quantity: Annotated[int, Field(strict=True, ge=1)]


class CartCreate(BaseModel):
    userId: RecordRef
    products: Annotated[list[CartItem], Field(min_length=1)]


class OrderCreate(BaseModel):
    userId: RecordRef
    cartId: RecordRef
    totalPrice: NonNegativeFloat
    status: NonEmptyStr = "Processing"


class ReviewCreate(BaseModel):
    productId: RecordRef
    userId: RecordRef
    rating: Annotated[int, Field(strict=True, ge=1, le=5)]
    comment: NonEmptyStr
