"""server.py
Server to launch a FastAPI / Swagger UI instance.
"""
import os
import tempfile
from typing import List, Optional

from fastapi import FastAPI, UploadFile, File, HTTPException
from pydantic import BaseModel, Field

from resume_engine.config import PARSER_DEFAULTS
from resume_engine.exceptions import (
    FileParserError,
    FileTooLargeError,
    FileNotSupportedError,
    FileEmptyError,
    InvalidResumeTextError,
    InvalidJobDescriptionError,
)
from resume_engine.logging import logger_factory
from resume_engine.models import (
    EducationEntry,
    ExperienceEntry,
    MatchReport,
    ParsingConfidence,
    PersonalInfo,
    ProjectEntry,
    StructuredResume,
)
from resume_engine.ats.ats_matcher import calculate_match, calculate_match_from_text
from resume_engine.parse_classes.parsing_confidence import get_parsing_confidence
from resume_engine.parse_classes.resume_parse_framework import ResumeParserFramework

logger = logger_factory.get_logger(__name__)

app = FastAPI(title="Resume Engine API", version="1.0")

# Initiate ResumeParserFramework for use when server calls
resume_parse_framework = ResumeParserFramework()


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------
class ParseTextInputs(BaseModel):
    text: str = Field(..., description="Resume text, line breaks included.")


class ParseResumeResponse(BaseModel):
    resume: StructuredResume
    confidence: ParsingConfidence


class PersonalInfoInputs(BaseModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    github: str = ""
    linkedin: str = ""
    summary: str = ""


class EducationInputs(BaseModel):
    school: str = ""
    degree: str = ""
    start: str = ""
    end: str = ""


class ExperienceInputs(BaseModel):
    company: str = ""
    role: str = ""
    description: str = ""
    start: str = ""
    end: str = ""


class ProjectInputs(BaseModel):
    title: str = ""
    description: str = ""
    tech_stack: List[str] = []
    link: str = ""


class StructuredResumeInputs(BaseModel):
    personal: PersonalInfoInputs = PersonalInfoInputs()
    education: List[EducationInputs] = []
    experience: List[ExperienceInputs] = []
    projects: List[ProjectInputs] = []
    skills: List[str] = []

    def to_structured_resume(self) -> StructuredResume:
        return StructuredResume(
            personal=PersonalInfo(**self.personal.model_dump()),
            education=[EducationEntry(**entry.model_dump()) for entry in self.education],
            experience=[ExperienceEntry(**entry.model_dump()) for entry in self.experience],
            projects=[ProjectEntry(**entry.model_dump()) for entry in self.projects],
            skills=list(self.skills),
        )


class AtsMatchInputs(BaseModel):
    job_description: str
    resume: Optional[StructuredResumeInputs] = Field(
        None, description="Structured resume. Provide this or `resume_text`."
    )
    resume_text: Optional[str] = Field(
        None, description="Raw resume text. Provide this or `resume`."
    )


def _file_error_status(error: FileParserError) -> int:
    if isinstance(error, FileTooLargeError):
        return 413
    if isinstance(error, FileNotSupportedError):
        return 415
    if isinstance(error, FileEmptyError):
        return 422
    return 400


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@app.post(
    "/parse_resume",
    response_model=ParseResumeResponse,
    summary="Parse a resume file and extract structured data",
    description="Uploads a resume (PDF, DOCX or TXT), processes it, and returns a StructuredResume with its parsing confidence.",
)
async def parse_resume(file: UploadFile = File(...)) -> ParseResumeResponse:
    """
    Upload a resume file, validate it, parse it, and return the extracted StructuredResume.
    """
    # ---- Validate file size ----
    contents = await file.read()
    max_bytes = PARSER_DEFAULTS.MAX_FILE_SIZE_MB * 1024 * 1024
    if len(contents) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Max allowed size is {PARSER_DEFAULTS.MAX_FILE_SIZE_MB} MB.",
        )

    # ---- Save uploaded file to a temp directory ----
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = os.path.join(temp_dir, os.path.basename(file.filename or "upload"))
        with open(temp_path, "wb") as f:
            f.write(contents)

        try:
            # ---- Run parsing pipeline ----
            resume = resume_parse_framework.parse_resume(file_path=temp_path)
        except FileParserError as e:
            raise HTTPException(status_code=_file_error_status(e), detail=str(e))
        except Exception as e:
            logger.error(f"Parsing '{file.filename}' failed: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    return ParseResumeResponse(resume=resume, confidence=get_parsing_confidence(resume))


@app.post(
    "/parse_text",
    response_model=ParseResumeResponse,
    summary="Parse resume text and extract structured data",
)
def parse_text(inputs: ParseTextInputs) -> ParseResumeResponse:
    try:
        resume = resume_parse_framework.parse_text(inputs.text)
    except InvalidResumeTextError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Parsing text failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return ParseResumeResponse(resume=resume, confidence=get_parsing_confidence(resume))


@app.post(
    "/ats/match",
    response_model=MatchReport,
    summary="Score a resume against a job description",
    description="Accepts either a structured resume or raw resume text, plus the job description text.",
)
def ats_match(inputs: AtsMatchInputs) -> MatchReport:
    if (inputs.resume is None) == (inputs.resume_text is None):
        raise HTTPException(
            status_code=422,
            detail="Provide exactly one of `resume` or `resume_text`.",
        )

    try:
        if inputs.resume is not None:
            return calculate_match(inputs.resume.to_structured_resume(), inputs.job_description)
        return calculate_match_from_text(inputs.resume_text, inputs.job_description)
    except (InvalidResumeTextError, InvalidJobDescriptionError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"ATS match failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
