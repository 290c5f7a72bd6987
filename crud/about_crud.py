from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from models.about import ABOUT_ID, About


def _find(db: Session):
    return db.query(About).filter(About.id == ABOUT_ID).first()


def get_about(db: Session):
    about = _find(db)
    if about is None:
        db.add(About(id=ABOUT_ID, content=""))
        try:
            db.commit()
        except IntegrityError:
            # A concurrent first read inserted the row
            db.rollback()
        about = _find(db)
    return about


def upsert_about(db: Session, content: str):
    about = _find(db)
    if about is None:
        about = About(id=ABOUT_ID, content=content)
        db.add(about)
    else:
        about.content = content
    db.commit()
    db.refresh(about)
    return about
