DATABASE_SECTION_HEADER = "Additional ingredients from database:"


def merge_ingredient_texts(ocr_text: str, database_text: str) -> str:
    """
    Combine label text with ingredients text from the product database.
    Either side is returned unchanged when the other is empty.
    """
    if not database_text:
        return ocr_text
    if not ocr_text:
        return database_text

    return f"{ocr_text}\n\n{DATABASE_SECTION_HEADER}\n{database_text}"
