# app/main.py

from fastapi import FastAPI

from app.api.cars import router as cars_router

app = FastAPI(
    title="Dealership Car Stock API",
    version="0.1.0",
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(cars_router)
