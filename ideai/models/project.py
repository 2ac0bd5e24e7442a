# Project model for the JSON store

DEFAULT_CATEGORY = "tech"
DEFAULT_STATUS = "active"


def project_doc(project_id, title, description, creator, created_at, category=None, funding=0,
                looking_for_investment=False):
    return {
        "id": project_id,
        "title": title,
        "description": description,
        "category": category or DEFAULT_CATEGORY,
        "funding": funding or 0,
        "creator": creator,
        "lookingForInvestment": looking_for_investment,
        "status": DEFAULT_STATUS,
        "createdAt": created_at,
        "investors": [],
        "likes": 0,
    }
