"""Main entry point for the FastAPI application."""

import uvicorn
# Import all models to ensure they're loaded before app creation
import components.finance.models
import components.inventory.models
import components.shopping.models
import components.todo.models
import components.budget.models
import components.wedding.models

from restapi.router import create_app

app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", reload=True)
