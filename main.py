from log_config.logging_config import setup_logging
setup_logging()
from fastapi import FastAPI
from routers import pages, pipeline
from provider import lifespan
from fastapi.middleware.cors import CORSMiddleware

app = FastAPI(title="Call Analysis Pipeline", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(pages.router, tags=["Pages"])
app.include_router(pipeline.router, tags=["Pipeline"])
