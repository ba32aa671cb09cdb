from typing import List, Optional
from sqlmodel import Session, select, desc

from domain.models.edit_suggestion import EditSuggestion
from domain.models.timestamps import utc_now

class EditSuggestionRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, suggestion_id: int) -> Optional[EditSuggestion]:
        return self.session.get(EditSuggestion, suggestion_id)

    def find_all(self, status: Optional[str] = None, limit: Optional[int] = None) -> List[EditSuggestion]:
        query = select(EditSuggestion)
        if status:
            query = query.where(EditSuggestion.status == status)
        query = query.order_by(desc(EditSuggestion.created_at), desc(EditSuggestion.id))
        if limit is not None:
            query = query.limit(limit)
        return self.session.exec(query).all()

    def create(self, suggestion: EditSuggestion) -> EditSuggestion:
        self.session.add(suggestion)
        self.session.commit()
        self.session.refresh(suggestion)
        return suggestion

    def update_status(self, suggestion: EditSuggestion, status: str, reviewer_id: str) -> EditSuggestion:
        suggestion.status = status
        suggestion.reviewed_by = reviewer_id
        suggestion.updated_at = utc_now()
        self.session.add(suggestion)
        self.session.commit()
        self.session.refresh(suggestion)
        return suggestion
