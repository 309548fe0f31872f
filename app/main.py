import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from utils import config

# Setup logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Import routes
from routes import restaurants, users, categories, menus, table_management, parking_management, bookings, order_management

# Register all models
import models  # noqa: F401

# Import database and error handlers
from utils.database import engine, Base
from utils.errors import register_exception_handlers

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title="Restaurant Operations API",
    description="Backend for restaurant owners to manage menus, tables, parking, bookings and orders",
    version="1.0.0",
    openapi_tags=[
        {"name": "restaurants", "description": "Restaurant signup and profile management"},
        {"name": "users", "description": "Diner accounts referenced by bookings and orders"},
        {"name": "categories", "description": "Menu categories"},
        {"name": "menus", "description": "Dishes"},
        {"name": "table_management", "description": "Dining tables"},
        {"name": "parking_management", "description": "Parking slots"},
        {"name": "bookings", "description": "Table bookings"},
        {"name": "orders", "description": "Orders and order items"},
    ],
)


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(restaurants.router)
app.include_router(users.router)
app.include_router(categories.router)
app.include_router(menus.router)
app.include_router(table_management.router)
app.include_router(parking_management.router)
app.include_router(bookings.router)
app.include_router(order_management.router)

# Root endpoint
@app.get("/")
async def root():
    return {"message": "Welcome to Restaurant Operations API"}


@app.get("/health")
async def health():
    return {"status": "ok"}

# Main run block
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
