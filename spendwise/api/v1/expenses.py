"""/v1/expenses - Log, browse and delete expenses"""

import uuid
import logging
from datetime import date
from typing import Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from spendwise.api.v1.schemas import ExpenseCreate, ExpenseListResponse, ExpenseResponse
from spendwise.api.dependencies import get_current_user_id, get_request_id
from spendwise.config import settings
from spendwise.infrastructure.database.session import get_db
from spendwise.infrastructure.database.repositories import ExpenseRepository, to_expense
from spendwise.infrastructure.database.models import ExpenseRecord
from spendwise.infrastructure.observability.metrics import expenses_logged_counter
from spendwise.domain.aggregation import total_spent
from spendwise.domain.catalog import category_color
from spendwise.domain.exceptions import ExpenseNotFoundError
from spendwise.domain.models import Category
from spendwise.domain.nudges import detect_impulsive_spending

router = APIRouter()


def _expense_response(record: ExpenseRecord) -> ExpenseResponse:
    return ExpenseResponse(
        id=str(record.id),
        item_name=record.item_name,
        amount=record.amount,
        category=record.category,
        expense_type=record.expense_type,
        date=record.date,
        category_color=category_color(record.category),
    )


@router.post("/expenses", response_model=ExpenseResponse, status_code=201)
def create_expense(
    request_body: ExpenseCreate,
    request: Request,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Log a new expense"""
    record = ExpenseRepository(db).create(
        user_id=user_id,
        item_name=request_body.item_name,
        amount=request_body.amount,
        category=request_body.category,
        expense_type=request_body.expense_type,
        spent_on=request_body.date,
    )
    db.commit()

    expenses_logged_counter.labels(category=request_body.category.value).inc()
    logging.info(
        "Expense logged",
        extra={
            "request_id": get_request_id(request),
            "user_id": user_id,
            "step": "expense_logged",
            "category": request_body.category.value,
        },
    )

    return _expense_response(record)


@router.get("/expenses", response_model=ExpenseListResponse)
def list_expenses(
    user_id: str = Depends(get_current_user_id),
    search: Optional[str] = Query(None, description="Match against item name"),
    category: Optional[Category] = Query(None),
    start: Optional[date] = Query(None, description="Earliest expense date (inclusive)"),
    end: Optional[date] = Query(None, description="Latest expense date (inclusive)"),
    sort_by: Literal["date", "amount"] = Query("date"),
    order: Literal["asc", "desc"] = Query("desc"),
    db: Session = Depends(get_db),
):
    """
    Browse expense history.

    Returns:
        Matching expenses, their count and total, and whether recent
        spending looks impulsive
    """
    expense_repo = ExpenseRepository(db)
    records = expense_repo.search(
        user_id,
        search=search,
        category=category,
        start=start,
        end=end,
        sort_by=sort_by,
        descending=order == "desc",
        limit=settings.expense_page_size,
    )
    expenses = [to_expense(r) for r in records]
    latest = [to_expense(r) for r in expense_repo.recent(user_id)]

    return ExpenseListResponse(
        expenses=[_expense_response(r) for r in records],
        count=len(records),
        total=total_spent(expenses),
        impulsive_spending=detect_impulsive_spending(latest),
    )


@router.delete("/expenses/{expense_id}", status_code=204)
def delete_expense(
    expense_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Delete one of the caller's expenses"""
    try:
        expense_uuid = uuid.UUID(expense_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid expense ID format")

    try:
        ExpenseRepository(db).delete(user_id, expense_uuid)
    except ExpenseNotFoundError:
        raise HTTPException(status_code=404, detail="Expense not found")

    db.commit()
    return Response(status_code=204)
