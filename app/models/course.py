from sqlalchemy import Column, BigInteger, Integer, VARCHAR

from app.db.base import Base

# SQLite 只对 INTEGER 主键自增
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")
# 有符号64位整数范围内的正整数才可能是合法ID
MAX_ID = 2 ** 63 - 1


def is_valid_id(value: int) -> bool:
    return 1 <= value <= MAX_ID


class Course(Base):
    """
    课程数据库模型

    课程服务拥有的权威课程记录
    """
    __tablename__ = "courses"

    id = Column(ID_TYPE, primary_key=True, autoincrement=True)
    title = Column(VARCHAR(100), nullable=False, unique=True)
    description = Column(VARCHAR(500), nullable=False)

    def __repr__(self) -> str:
        return f"<Course id={self.id} title={self.title!r}>"
