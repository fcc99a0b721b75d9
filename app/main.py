import logging
from fastapi import FastAPI
from app.api.router import api_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(title="Shopify Storefront Data Layer")

app.include_router(api_router)

@app.get("/")
def root():
    return {"status": "running", "message": "Shopify Storefront Data Layer"}

@app.get("/health")
def health_check():
    return {"status": "healthy"}
