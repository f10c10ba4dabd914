from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

# Page routes answer with the name of the view to render
router = APIRouter(
    tags=["pages"],
    default_response_class=PlainTextResponse,
)


@router.get("/")
def home() -> str:
    return "index"


@router.get("/cards")
def cards() -> str:
    return "cards"


@router.get("/transactions")
def transactions() -> str:
    return "transactions"


@router.get("/wallet")
def wallet() -> str:
    return "wallet"
