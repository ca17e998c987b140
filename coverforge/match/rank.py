from typing import Iterable, List, Tuple

from .projects import CATALOG, FALLBACK_PROJECTS, ProjectRecord

TOP_N = 4

def _job_text(job_description: str, job_title: str) -> str:
    return f"{job_description or ''} {job_title or ''}".lower()

def score_project(project: ProjectRecord, text: str) -> int:
    """One point per keyword found anywhere in the (lowercased) job text."""
    return sum(1 for kw in project.keywords if kw in text)

def rank_projects(job_description: str, job_title: str,
                  catalog: Iterable[ProjectRecord] = CATALOG) -> List[Tuple[ProjectRecord, int]]:
    """Projects with a positive score, best first. Ties keep catalog order."""
    text = _job_text(job_description, job_title)
    scored = [(p, score_project(p, text)) for p in catalog]
    scored = [(p, s) for p, s in scored if s > 0]
    scored.sort(key=lambda ps: ps[1], reverse=True)
    return scored

def select_relevant_projects(job_description: str, job_title: str, limit: int = TOP_N) -> List[str]:
    top = rank_projects(job_description, job_title)[:limit]
    if not top:
        return list(FALLBACK_PROJECTS)
    return [p.summary() for p, _ in top]
