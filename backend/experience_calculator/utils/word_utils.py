from docx.shared import Pt, RGBColor


def set_paragraph_font(paragraph, font_name: str = "Times New Roman", font_size: int = 11, bold: bool = None):
    for run in paragraph.runs:
        run.font.name = font_name
        run.font.size = Pt(font_size)
        if bold is not None:
            run.bold = bold


def set_paragraph_format(paragraph, space_before: int = 0, space_after: int = 2, line_spacing: float = 1.0):
    fmt = paragraph.paragraph_format
    fmt.space_before = Pt(space_before)
    fmt.space_after = Pt(space_after)
    fmt.line_spacing = line_spacing


def set_heading_font(heading, font_name: str = "Times New Roman", font_size: int = 16):
    # Headings carry a theme colour by default; keep them black like body text
    for run in heading.runs:
        run.font.name = font_name
        run.font.size = Pt(font_size)
        run.font.color.rgb = RGBColor(0, 0, 0)


def set_cell_text(cell, text: str, bold: bool = False, font_name: str = "Times New Roman", font_size: int = 10):
    cell.text = ""
    paragraph = cell.paragraphs[0]
    run = paragraph.add_run(text)
    run.bold = bold
    set_paragraph_font(paragraph, font_name=font_name, font_size=font_size)
    set_paragraph_format(paragraph)
