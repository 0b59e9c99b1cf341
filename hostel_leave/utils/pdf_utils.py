"""
PDF generation utilities for leave approval certificates
"""

from typing import Any, Dict, List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

BRAND_COLOR = HexColor("#0984e3")
CERTIFICATE_TITLE = "HOSTEL LEAVE APPROVAL FORM"
SIGNATURE_LABELS = ["Student Signature:", "Parent Signature:", "RC / Warden Signature:"]


class PDFGenerator:
    """Leave certificate PDF generation"""

    def __init__(self, page_size=A4, margins=None):
        self.page_size = page_size
        self.margins = margins or {'top': 1.5*cm, 'bottom': 1.5*cm, 'left': 1.5*cm, 'right': 1.5*cm}
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    @property
    def content_width(self) -> float:
        return self.page_size[0] - self.margins['left'] - self.margins['right']

    def _setup_custom_styles(self):
        """Setup custom paragraph styles"""
        self.styles.add(ParagraphStyle(
            name='BannerTitle',
            parent=self.styles['Heading1'],
            fontName='Helvetica-Bold',
            fontSize=20,
            leading=24,
            textColor=colors.white,
            alignment=TA_CENTER
        ))

        self.styles.add(ParagraphStyle(
            name='SectionHeading',
            parent=self.styles['Heading2'],
            fontName='Helvetica-Bold',
            fontSize=14,
            textColor=BRAND_COLOR,
            spaceBefore=18,
            spaceAfter=8
        ))

        self.styles.add(ParagraphStyle(
            name='InfoLine',
            parent=self.styles['Normal'],
            fontName='Helvetica',
            fontSize=12,
            leading=16,
            alignment=TA_LEFT
        ))

        self.styles.add(ParagraphStyle(
            name='TableCell',
            parent=self.styles['Normal'],
            fontSize=10,
            alignment=TA_CENTER
        ))

        self.styles.add(ParagraphStyle(
            name='TableHeader',
            parent=self.styles['Normal'],
            fontSize=10,
            textColor=colors.white,
            alignment=TA_CENTER,
            fontName='Helvetica-Bold'
        ))

        self.styles.add(ParagraphStyle(
            name='Footer',
            parent=self.styles['Normal'],
            fontSize=10,
            textColor=colors.grey,
            alignment=TA_CENTER
        ))

    def create_document(self, filename: str, title: Optional[str] = None,
                        author: Optional[str] = None, subject: Optional[str] = None) -> SimpleDocTemplate:
        """Create a new PDF document"""
        doc = SimpleDocTemplate(
            filename,
            pagesize=self.page_size,
            topMargin=self.margins['top'],
            bottomMargin=self.margins['bottom'],
            leftMargin=self.margins['left'],
            rightMargin=self.margins['right']
        )

        if title:
            doc.title = title
        if author:
            doc.author = author
        if subject:
            doc.subject = subject

        return doc

    def _banner(self, title: str) -> Table:
        banner = Table([[Paragraph(escape(title), self.styles['BannerTitle'])]],
                       colWidths=[self.content_width], rowHeights=[2*cm])
        banner.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, -1), BRAND_COLOR),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ]))
        return banner

    def _info_line(self, label: str, value: Any) -> Paragraph:
        return Paragraph(f"<b>{escape(label)}:</b> {escape(str(value))}", self.styles['InfoLine'])

    def _create_table(self, data: List[List[str]], headers: List[str]) -> Table:
        """Create a header + rows table in the certificate colours"""
        table_data = [[Paragraph(escape(h), self.styles['TableHeader']) for h in headers]]
        for row in data:
            table_data.append([Paragraph(escape(str(cell)), self.styles['TableCell']) for cell in row])

        col_width = self.content_width / len(headers)
        table = Table(table_data, colWidths=[col_width] * len(headers))
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), BRAND_COLOR),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
            ('GRID', (0, 0), (-1, -1), 0.75, colors.black),
        ]))
        return table

    def _signature_boxes(self, labels: List[str]) -> Table:
        col_width = self.content_width / len(labels)
        table = Table(
            [[Paragraph(f"<b>{escape(label)}</b>", self.styles['InfoLine']) for label in labels],
             ['' for _ in labels]],
            colWidths=[col_width] * len(labels),
            rowHeights=[None, 1.5*cm],
        )
        style = [('VALIGN', (0, 0), (-1, -1), 'BOTTOM')]
        # One empty bordered box under each label
        for col in range(len(labels)):
            style.append(('BOX', (col, 1), (col, 1), 1, colors.black))
        style.append(('LEFTPADDING', (0, 0), (-1, -1), 6))
        style.append(('RIGHTPADDING', (0, 0), (-1, -1), 6))
        table.setStyle(TableStyle(style))
        return table

    def generate_leave_certificate(self, filename: str, data: Dict[str, Any]) -> str:
        """
        Render a leave approval certificate.

        Expected keys: student_name, student_id, applied_at, email, hostel,
        year, from_date, to_date, reason, status, admin_comment, footer.
        Date values must already be formatted strings.
        """
        doc = self.create_document(filename, title="Hostel Leave Approval",
                                   subject=f"Leave approval for {data.get('student_name', '')}")
        status = str(data.get('status', '')).upper()
        story = [self._banner(CERTIFICATE_TITLE), Spacer(1, 18)]

        story.append(self._info_line("Student Name", data.get('student_name', '')))
        story.append(self._info_line("Student ID", data.get('student_id', '')))
        story.append(self._info_line("Applied Date", data.get('applied_at', '')))
        story.append(self._info_line("Email", data.get('email', '')))
        story.append(self._info_line("Hostel", data.get('hostel', '')))
        story.append(self._info_line("Year", data.get('year', '')))

        story.append(Paragraph("Leave Details", self.styles['SectionHeading']))
        story.append(self._create_table(
            [[data.get('from_date', ''), data.get('to_date', ''), data.get('reason', ''), status]],
            headers=["From Date", "To Date", "Reason", "Status"],
        ))

        story.append(Spacer(1, 18))
        story.append(Paragraph(
            f"<b>Leave Status:</b> <font color='green'>{escape(status)}</font>",
            self.styles['InfoLine'],
        ))
        if data.get('admin_comment'):
            story.append(self._info_line("Admin Comment", data['admin_comment']))

        story.append(Spacer(1, 36))
        story.append(self._signature_boxes(SIGNATURE_LABELS))

        story.append(Spacer(1, 48))
        story.append(Paragraph(escape(data.get('footer', '')), self.styles['Footer']))

        doc.build(story)
        return filename
