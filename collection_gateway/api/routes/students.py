"""/api/student - student CRUD"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, Response

from collection_gateway.api.dependencies import get_repositories
from collection_gateway.api.routes.schemas import StudentRequest, StudentResponse
from collection_gateway.domain.exceptions import StudentNotFoundError
from collection_gateway.domain.models import Student
from collection_gateway.domain.repositories import Repositories

router = APIRouter()


@router.get("/student", response_model=List[StudentResponse])
def list_students(repositories: Repositories = Depends(get_repositories)):
    return [StudentResponse.from_domain(s) for s in repositories.students.list()]


@router.post("/student", response_model=StudentResponse, status_code=201)
def create_student(request_body: StudentRequest, repositories: Repositories = Depends(get_repositories)):
    student = Student(id=str(uuid.uuid4()), **request_body.model_dump())
    return StudentResponse.from_domain(repositories.students.insert(student))


@router.get("/student/{student_id}", response_model=StudentResponse)
def get_student(student_id: str, repositories: Repositories = Depends(get_repositories)):
    student = repositories.students.get(student_id)
    if not student:
        raise StudentNotFoundError(student_id)
    return StudentResponse.from_domain(student)


@router.put("/student/{student_id}", response_model=StudentResponse)
def replace_student(
    student_id: str,
    request_body: StudentRequest,
    repositories: Repositories = Depends(get_repositories),
):
    """
    Replace every field of a student.

    Existing debts keep the monthly percent they were opened with.
    """
    updated = repositories.students.update(Student(id=student_id, **request_body.model_dump()))
    if not updated:
        raise StudentNotFoundError(student_id)
    return StudentResponse.from_domain(updated)


@router.delete("/student/{student_id}", status_code=204)
def delete_student(student_id: str, repositories: Repositories = Depends(get_repositories)):
    if not repositories.students.delete(student_id):
        raise StudentNotFoundError(student_id)
    return Response(status_code=204)
