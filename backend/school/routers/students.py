# school/routers/students.py
import threading
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from ..database.session import get_db
from ..database.models.student import Student
from ..database.repositories.student_repository import StudentRepository
from ..schemas.student import StudentCreate, StudentRead, FacultyRead
from ..services.exceptions import NotFoundError
from ..services.student_service import StudentService

router = APIRouter(prefix="/students", tags=["students"])

# One lock for every request, synchronized prints never interleave
_print_lock = threading.Lock()


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    return StudentService(StudentRepository(db), print_lock=_print_lock)


def _to_model(payload: StudentCreate) -> Student:
    return Student(name=payload.name, age=payload.age, faculty_id=payload.faculty_id)


@router.post("", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
def add_student(payload: StudentCreate, service: StudentService = Depends(get_student_service)):
    return service.add(_to_model(payload))

@router.get("", response_model=List[StudentRead])
def list_students(service: StudentService = Depends(get_student_service)):
    return service.list_all()

# Fixed paths are registered before /{student_id} so they are not parsed as ids

@router.get("/age-range", response_model=List[StudentRead])
def students_by_age_range(
    min_age: int = Query(..., ge=0),
    max_age: int = Query(..., ge=0),
    service: StudentService = Depends(get_student_service)
):
    return service.by_age_range(min_age, max_age)

@router.get("/count")
def count_students(service: StudentService = Depends(get_student_service)):
    return {"count": service.count()}

@router.get("/average-age")
def average_age(service: StudentService = Depends(get_student_service)):
    return {"average_age": service.average_age_aggregate()}

@router.get("/average-age/in-memory")
def average_age_in_memory(service: StudentService = Depends(get_student_service)):
    return {"average_age": service.average_age()}

@router.get("/last", response_model=List[StudentRead])
def last_students(service: StudentService = Depends(get_student_service)):
    return service.last_students()

@router.get("/names-starting-with-a", response_model=List[str])
def names_starting_with_a(service: StudentService = Depends(get_student_service)):
    return service.names_starting_with()

@router.get("/sum")
def constant_sum():
    return {"sum": StudentService.constant_sum()}

@router.post("/print-parallel", status_code=status.HTTP_204_NO_CONTENT)
def print_parallel(service: StudentService = Depends(get_student_service)):
    service.print_parallel()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/print-synchronized", status_code=status.HTTP_204_NO_CONTENT)
def print_synchronized(service: StudentService = Depends(get_student_service)):
    service.print_synchronized()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{student_id}", response_model=StudentRead)
def find_student(student_id: int, service: StudentService = Depends(get_student_service)):
    try:
        return service.find(student_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/{student_id}", response_model=StudentRead)
def edit_student(student_id: int, payload: StudentCreate, service: StudentService = Depends(get_student_service)):
    updated = service.edit(student_id, _to_model(payload))
    if updated is None:
        raise HTTPException(status_code=404, detail=f"Student not found: id={student_id}")
    return updated

@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: int, service: StudentService = Depends(get_student_service)):
    service.delete(student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{student_id}/faculty", response_model=Optional[FacultyRead])
def faculty_of_student(student_id: int, service: StudentService = Depends(get_student_service)):
    try:
        return service.faculty_of(student_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
