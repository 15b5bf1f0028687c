# routers/category.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database import get_db
from models import Category
from schemas.category import CategoryCreate, CategoryResponse, CategoryCreated

router = APIRouter(tags=["categories"])


@router.get("/categories", response_model=List[CategoryResponse])
def get_categories(db: Session = Depends(get_db)):
    return db.query(Category).order_by(Category.name.asc()).all()


@router.post("/add-category", response_model=CategoryCreated)
@router.post("/categories", response_model=CategoryCreated)
def add_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    category = Category(name=category_data.name)
    db.add(category)
    db.commit()
    db.refresh(category)

    return CategoryCreated(
        message="Category added successfully",
        data=CategoryResponse.model_validate(category)
    )
