# constants.py

MIN_EXPENSE_TRANSACTIONS = 5
TOP_CATEGORY_LIMIT = 3
CURRENCY_LABEL = "VND"

MESSAGES = {
    "ai_unavailable": "Tính năng AI không khả dụng. Vui lòng định cấu hình khóa API của bạn.",
    "not_enough_data": "Chưa đủ dữ liệu chi tiêu để tạo thông tin chi tiết. Hãy thêm một vài giao dịch nữa.",
    "generation_error": "Rất tiếc, đã xảy ra lỗi khi tạo thông tin chi tiết về tài chính.",
}

PROMPTS = {
    "saving_tips": """
Dựa trên bản tóm tắt chi tiêu sau đây bằng tiếng Việt, hãy đưa ra ba mẹo hữu ích, ngắn gọn để tiết kiệm tiền.
Hãy trả lời bằng tiếng Việt.
- Tổng chi tiêu gần đây: {total_expense} VND
- Các hạng mục chi tiêu hàng đầu: {top_categories}

Ví dụ về định dạng phản hồi mong muốn:
1. Mẹo một ở đây.
2. Mẹo hai ở đây.
3. Mẹo ba ở đây.
""",
}
