from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import get_menu_store, router


@asynccontextmanager
async def lifespan(_: FastAPI):
    yield
    await get_menu_store().close()


app = FastAPI(title="Healthy Breakfast", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
