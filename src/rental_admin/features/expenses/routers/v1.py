"""Financial expenses API v1 router."""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status

from ....api.dependencies import (
    get_authorization_service,
    get_current_user,
    get_expense_service,
    require_feature,
)
from ...authorization import AuthorizationService
from ..services.financial_expense_service import FinancialExpenseService

router = APIRouter(
    prefix="/financialexpenses",
    tags=["Financial Expenses"],
    responses={
        403: {"description": "Insufficient permissions"},
        404: {"description": "Financial expense not found"},
    },
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create financial expense",
    dependencies=[Depends(require_feature("create:financialexpenses"))],
)
async def create_expense(
    body: Dict[str, Any] = Body(...),
    caller=Depends(get_current_user),
    expenses: FinancialExpenseService = Depends(get_expense_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Dict[str, Any]:
    values = authorization.filter_input(caller, "create:financialexpenses", body)
    expense = await expenses.create(values)
    return expense.to_dict()


@router.get(
    "",
    summary="List financial expenses",
    dependencies=[Depends(require_feature("read:financialexpenses"))],
)
async def list_expenses(
    expenses: FinancialExpenseService = Depends(get_expense_service),
) -> List[Dict[str, Any]]:
    return [expense.to_dict() for expense in await expenses.list_all()]


@router.get(
    "/{expense_id}",
    summary="Get financial expense",
    dependencies=[Depends(require_feature("read:financialexpenses"))],
)
async def get_expense(
    expense_id: str,
    expenses: FinancialExpenseService = Depends(get_expense_service),
) -> Dict[str, Any]:
    expense = await expenses.find_one_by_id(expense_id)
    return expense.to_dict()


@router.patch(
    "/{expense_id}",
    summary="Update financial expense",
    dependencies=[Depends(require_feature("update:financialexpenses"))],
)
async def update_expense(
    expense_id: str,
    body: Dict[str, Any] = Body(...),
    caller=Depends(get_current_user),
    expenses: FinancialExpenseService = Depends(get_expense_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Dict[str, Any]:
    values = authorization.filter_input(caller, "update:financialexpenses", body)
    expense = await expenses.update(expense_id, values)
    return expense.to_dict()


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete financial expense",
    dependencies=[Depends(require_feature("delete:financialexpenses"))],
)
async def delete_expense(
    expense_id: str,
    expenses: FinancialExpenseService = Depends(get_expense_service),
) -> Response:
    await expenses.delete(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
