import os
import logging
import subprocess

from experience_calculator.models.report import ExperienceReport
from .base_writer import BaseWriter


def _latex_escape(text: str) -> str:
    """Escape LaTeX special characters in arbitrary text.

    Characters:  & % $ # _ { } ~ ^ \
    ~ and ^ have no simple single-char escapes; use \textasciitilde{} and \textasciicircum{}
    """
    if text is None:
        return ""
    replacements = {
        "\\": r"\textbackslash{}",
        "&": r"\&",
        "%": r"\%",
        "$": r"\$",
        "#": r"\#",
        "_": r"\_",
        "{": r"\{",
        "}": r"\}",
        "~": r"\textasciitilde{}",
        "^": r"\textasciicircum{}",
    }
    out = []
    for ch in str(text):
        out.append(replacements.get(ch, ch))
    return "".join(out)


class LatexReportWriter(BaseWriter):
    """
    LatexReportWriter renders an experience report as a LaTeX article with a
    single table and the overall-experience line underneath.
    Methods:
        write(report: ExperienceReport, output: str = None, to_pdf: bool = False) -> str:
            Generates the .tex file and optionally compiles it to PDF.
        generate_file(report: ExperienceReport, output: str = None) -> str:
            Returns the LaTeX source, or the path it was written to when output is given.
        to_pdf(output: str, src_path: str = None) -> str:
            Compiles src_path with pdflatex into output.
            Raises:
                RuntimeError: If the LaTeX to PDF conversion fails.
    """
    def __init__(self, template: str = None):
        super().__init__(template, ".tex")
        self._logger = logging.getLogger("expcalc.writer")

    def write(self, report: ExperienceReport, output: str = None, to_pdf: bool = False):
        tex_file = self.generate_file(report, self.with_suffix(output, ".tex") if output else None)
        if not output:
            return tex_file
        self._logger.info("LaTeX file generated: %s", tex_file)
        if not to_pdf:
            return tex_file
        pdf = self.to_pdf(self.with_suffix(output, ".pdf"), tex_file)
        self._logger.info("PDF generated: %s", pdf)
        return pdf

    def generate_file(self, report: ExperienceReport, output: str = None):
        frame = report.to_frame()
        columns = "|" + "|".join(["l"] * len(report.header)) + "|"

        tex = []
        tex.append(r"\documentclass[11pt]{article}")
        tex.append(r"\usepackage[margin=1in]{geometry}")
        tex.append(r"\usepackage[T1]{fontenc}")
        tex.append(r"\usepackage[utf8]{inputenc}")
        tex.append(r"\setlength{\parindent}{0pt}")
        tex.append(r"\begin{document}")

        tex.append(r"\begin{center}")
        tex.append(r"\textbf{\LARGE " + _latex_escape(report.title) + r"}")
        tex.append(r"\end{center}")
        tex.append(r"\vspace{0.5cm}")

        tex.append(r"\begin{center}")
        tex.append(r"\begin{tabular}{" + columns + "}")
        tex.append(r"\hline")
        tex.append(" & ".join(r"\textbf{" + _latex_escape(h) + "}" for h in report.header) + r" \\")
        tex.append(r"\hline")
        for row in frame.itertuples(index=False):
            tex.append(" & ".join(_latex_escape(cell) for cell in row) + r" \\")
            tex.append(r"\hline")
        tex.append(r"\end{tabular}")
        tex.append(r"\end{center}")

        if report.summary_line:
            tex.append(r"\vspace{0.5cm}")
            tex.append(r"\begin{center}")
            tex.append(r"\textbf{" + _latex_escape(report.summary_line) + "}")
            tex.append(r"\end{center}")

        tex.append(r"\end{document}")

        tex_content = "\n".join(tex)
        if output:
            with open(output, "w", encoding="utf-8") as f:
                f.write(tex_content)
            return output

        return tex_content

    def to_pdf(self, output: str, src_path: str = None):
        try:
            # Explicit output directory avoids cwd dependence
            out_dir = os.path.dirname(os.path.abspath(output))
            src_abs = os.path.abspath(src_path)
            subprocess.run(
                ["pdflatex", "-interaction=nonstopmode", f"-output-directory={out_dir}", src_abs],
                check=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL,
            )
            generated = os.path.join(out_dir, os.path.splitext(os.path.basename(src_abs))[0] + ".pdf")
            if os.path.isfile(generated) and os.path.abspath(output) != generated:
                os.replace(generated, output)
            return output
        except Exception as e:
            raise RuntimeError("LaTeX to PDF conversion failed") from e
