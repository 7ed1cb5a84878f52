"""
Company API Endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobboard.api.deps import current_user_id
from jobboard.core.database import get_db
from jobboard.core.exceptions import AlreadyExists, Forbidden, NotFound
from jobboard.models.company import Company
from jobboard.models.user import User
from jobboard.schemas.company import CompanyCreate, CompanyResponse, CompanyEnvelope, CompanyListEnvelope

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post("/", response_model=CompanyEnvelope, status_code=status.HTTP_201_CREATED)
def register_company(
    company_data: CompanyCreate,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db)
):
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFound("User not found")
    if not user.is_employer:
        raise Forbidden("Only employers can register companies")
    if db.query(Company).filter(Company.name == company_data.name).first():
        raise AlreadyExists("You can't register same company.")

    company = Company(**company_data.model_dump(), user_id=user_id)
    db.add(company)
    db.commit()
    db.refresh(company)
    return CompanyEnvelope(message="Company registered successfully.", company=CompanyResponse.model_validate(company))


@router.get("/", response_model=CompanyListEnvelope)
def list_my_companies(user_id: int = Depends(current_user_id), db: Session = Depends(get_db)):
    companies = db.query(Company).filter(Company.user_id == user_id).order_by(Company.created_at.desc()).all()
    return CompanyListEnvelope(
        message=f"Found {len(companies)} companies",
        companies=[CompanyResponse.model_validate(c) for c in companies]
    )


@router.get("/{company_id}", response_model=CompanyEnvelope)
def get_company(company_id: int, db: Session = Depends(get_db)):
    company = db.query(Company).filter(Company.id == company_id).first()
    if not company:
        raise NotFound("Company not found.")
    return CompanyEnvelope(message="Company found", company=CompanyResponse.model_validate(company))
