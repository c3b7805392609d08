"""StockStar Pydantic schemas"""
