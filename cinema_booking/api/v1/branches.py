from fastapi import APIRouter, Depends, HTTPException

from cinema_booking.api.v1.schemas import (
    BranchCreateSchema,
    BranchSchema,
    BranchUpdateSchema,
    MessageSchema,
)
from cinema_booking.application.exceptions import BranchNotFoundError
from cinema_booking.application.use_cases.branch_records import BranchRecordsUseCase
from cinema_booking.wiring.dependencies import get_branch_records_use_case

router = APIRouter()


@router.post("/branches", response_model=BranchSchema, status_code=201)
def create_branch(
    req: BranchCreateSchema,
    uc: BranchRecordsUseCase = Depends(get_branch_records_use_case),
):
    return BranchSchema.from_entity(uc.create(req.model_dump()))


@router.get("/branches", response_model=list[BranchSchema])
def list_branches(uc: BranchRecordsUseCase = Depends(get_branch_records_use_case)):
    return [BranchSchema.from_entity(b) for b in uc.list_all()]


@router.get("/branches/{branch_id}", response_model=BranchSchema)
def get_branch(branch_id: str, uc: BranchRecordsUseCase = Depends(get_branch_records_use_case)):
    try:
        return BranchSchema.from_entity(uc.get(branch_id))
    except BranchNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/branches/{branch_id}", response_model=BranchSchema)
def update_branch(
    branch_id: str,
    req: BranchUpdateSchema,
    uc: BranchRecordsUseCase = Depends(get_branch_records_use_case),
):
    fields = {k: v for k, v in req.model_dump(exclude_unset=True).items() if v is not None or k == "google_maps_url"}
    try:
        return BranchSchema.from_entity(uc.update(branch_id, fields))
    except BranchNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/branches/{branch_id}", response_model=MessageSchema)
def delete_branch(branch_id: str, uc: BranchRecordsUseCase = Depends(get_branch_records_use_case)):
    try:
        uc.delete(branch_id)
    except BranchNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return MessageSchema(message="Branch deleted successfully")
