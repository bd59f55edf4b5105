"""Pydantic schemas for API requests and responses."""

from backend.schemas.auth import (  # noqa: F401
    Credentials,
    TokenResponse,
    UserCreate,
    UserRead,
)
from backend.schemas.error import (  # noqa: F401
    ErrorResponse,
    ErrorType,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from backend.schemas.favourites import (  # noqa: F401
    FavouriteCreatedResponse,
    FavouriteListResponse,
    FavouritePokemon,
    FavouriteRecord,
    UserFavourites,
)
from backend.schemas.pokemon import (  # noqa: F401
    PaginatedPokemonResponse,
    PokemonDetail,
    PokemonListItem,
    PokemonTypeRead,
)
