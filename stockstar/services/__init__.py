"""StockStar business services"""
