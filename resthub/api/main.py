# resthub/api/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resthub.api.routes import bedtime_routes
from resthub.config import get_config

config = get_config()

app = FastAPI(
    title=config.get('app.title', "RestHub API"),
    description=config.get('app.description', "API for calculating an ideal bedtime"),
    version=config.get('app.version', "0.1.0")
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # For development - restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(bedtime_routes.router)

@app.get("/")
async def root():
    return {
        "message": "Welcome to the RestHub API",
        "version": app.version,
        "documentation": "/docs"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
