"""UI template library.

Each ``UITemplate`` describes one scaffoldable UI stack: the component
framework it targets, its default style configuration, the npm dependencies
it needs and the components/layouts it ships.  ``TemplateConfigurator``
starts from a template's ``default_config``.

Also provides the preset color palettes and font combinations offered as
quick customizations.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from firebase_architect.registry import ReadOnlyDict


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


class UITemplate(BaseModel):
    """A scaffoldable UI template."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    id: str
    name: str
    description: str = ""
    framework: str = Field(..., description="Framework label, e.g. 'Material-UI (MUI)'")
    category: str = ""
    preview: ReadOnlyDict[str, Any] = Field(default_factory=dict)
    default_config: ReadOnlyDict[str, Any] = Field(
        ..., description="colors / typography / spacing / borderRadius (+ extras)"
    )
    components: tuple[str, ...] = ()
    layouts: tuple[str, ...] = ()
    dependencies: ReadOnlyDict[str, str] = Field(default_factory=dict)
    assets: ReadOnlyDict[str, Any] = Field(default_factory=dict)
    special_features: ReadOnlyDict[str, bool] = Field(default_factory=dict)


def _typography(
    font_family: str,
    font_size: int,
    medium: int = 500,
    bold: int = 700,
    **extra: Any,
) -> dict[str, Any]:
    return {
        "fontFamily": font_family,
        "fontSize": font_size,
        "fontWeightLight": 300,
        "fontWeightRegular": 400,
        "fontWeightMedium": medium,
        "fontWeightBold": bold,
        **extra,
    }


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

_TEMPLATES: list[UITemplate] = [
    UITemplate(
        id="material-modern",
        name="Material Modern",
        description=(
            "Clean, modern design based on Google Material Design principles. "
            "Perfect for data-heavy applications."
        ),
        framework="Material-UI (MUI)",
        category="enterprise",
        preview={
            "thumbnail": "/templates/material-modern/thumbnail.png",
            "liveDemo": "https://mui.com/store/previews/berry-react-material-admin/",
        },
        default_config={
            "colors": {
                "primary": "#1976d2",
                "secondary": "#dc004e",
                "success": "#4caf50",
                "warning": "#ff9800",
                "error": "#f44336",
                "info": "#2196f3",
                "background": "#f5f5f5",
                "surface": "#ffffff",
                "text": {"primary": "#000000de", "secondary": "#00000099"},
            },
            "typography": _typography("'Roboto', 'Helvetica', 'Arial', sans-serif", 14),
            "spacing": 8,
            "borderRadius": 4,
            "shadows": "elevation",
        },
        components=[
            "AppBar", "Drawer", "DataGrid", "Card", "Button", "TextField",
            "Select", "Autocomplete", "DatePicker", "Dialog", "Snackbar",
            "Tabs", "Stepper", "Accordion", "Chip", "Avatar", "Badge",
        ],
        layouts=["dashboard", "list-view", "form-view", "detail-view", "settings"],
        dependencies={
            "@mui/material": "^5.15.0",
            "@mui/icons-material": "^5.15.0",
            "@mui/x-data-grid": "^6.18.0",
            "@mui/x-date-pickers": "^6.18.0",
            "@emotion/react": "^11.11.0",
            "@emotion/styled": "^11.11.0",
        },
        assets={"fonts": ["Roboto"], "icons": "material-icons"},
    ),
    UITemplate(
        id="ant-design-pro",
        name="Ant Design Pro",
        description=(
            "Enterprise-grade admin template with comprehensive business components. "
            "Trusted by Fortune 500 companies."
        ),
        framework="Ant Design",
        category="enterprise",
        preview={
            "thumbnail": "/templates/ant-design-pro/thumbnail.png",
            "liveDemo": "https://preview.pro.ant.design/dashboard/analysis",
        },
        default_config={
            "colors": {
                "primary": "#1890ff",
                "success": "#52c41a",
                "warning": "#faad14",
                "error": "#f5222d",
                "info": "#1890ff",
                "background": "#f0f2f5",
                "surface": "#ffffff",
                "text": {
                    "primary": "rgba(0, 0, 0, 0.85)",
                    "secondary": "rgba(0, 0, 0, 0.65)",
                },
            },
            "typography": _typography(
                "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, "
                "'Helvetica Neue', Arial, sans-serif",
                14,
                bold=600,
            ),
            "spacing": 8,
            "borderRadius": 2,
            "shadows": "subtle",
        },
        components=[
            "Layout", "Menu", "Table", "Form", "Card", "Button", "Input",
            "Select", "DatePicker", "Modal", "Message", "Notification",
            "Tabs", "Steps", "Collapse", "Tag", "Avatar", "Badge", "Descriptions",
        ],
        layouts=["pro-layout", "list-page", "form-page", "detail-page", "result-page"],
        dependencies={
            "antd": "^5.12.0",
            "@ant-design/icons": "^5.2.0",
            "@ant-design/pro-components": "^2.6.0",
            "@ant-design/pro-layout": "^7.17.0",
        },
        assets={"fonts": ["system"], "icons": "ant-design-icons"},
    ),
    UITemplate(
        id="tailadmin-modern",
        name="TailAdmin Modern",
        description=(
            "Modern, utility-first design with Tailwind CSS. "
            "Highly customizable and developer-friendly."
        ),
        framework="Tailwind CSS",
        category="modern",
        preview={
            "thumbnail": "/templates/tailadmin/thumbnail.png",
            "liveDemo": "https://react-demo.tailadmin.com/",
        },
        default_config={
            "colors": {
                "primary": "#3c50e0",
                "secondary": "#80caee",
                "success": "#10b981",
                "warning": "#fbbf24",
                "error": "#ef4444",
                "info": "#3b82f6",
                "background": "#f1f5f9",
                "surface": "#ffffff",
                "text": {"primary": "#1c2434", "secondary": "#64748b"},
            },
            "typography": _typography("'Satoshi', 'Inter', sans-serif", 16),
            "spacing": 4,
            "borderRadius": 6,
            "shadows": "tailwind",
        },
        components=[
            "Card", "Button", "Input", "Select", "DataTable", "Modal",
            "Dropdown", "Alert", "Badge", "Breadcrumb", "Pagination",
            "Tabs", "Accordion", "Switch", "Checkbox", "Radio",
        ],
        layouts=["dashboard", "analytics", "ecommerce", "crm", "settings"],
        dependencies={
            "tailwindcss": "^3.4.0",
            "@headlessui/react": "^1.7.17",
            "@heroicons/react": "^2.1.1",
            "apexcharts": "^3.45.0",
            "react-apexcharts": "^1.4.1",
        },
        assets={"fonts": ["Satoshi", "Inter"], "icons": "heroicons"},
    ),
    UITemplate(
        id="coreui-enterprise",
        name="CoreUI Enterprise",
        description=(
            "Bootstrap-based enterprise solution with 55M+ downloads. "
            "Battle-tested and reliable."
        ),
        framework="CoreUI (Bootstrap)",
        category="enterprise",
        preview={
            "thumbnail": "/templates/coreui/thumbnail.png",
            "liveDemo": "https://coreui.io/react/demo/4.0/free/",
        },
        default_config={
            "colors": {
                "primary": "#321fdb",
                "secondary": "#9da5b1",
                "success": "#2eb85c",
                "warning": "#f9b115",
                "error": "#e55353",
                "info": "#39f",
                "background": "#ebedef",
                "surface": "#ffffff",
                "text": {"primary": "#4f5d73", "secondary": "#768192"},
            },
            "typography": _typography("'Helvetica Neue', Helvetica, Arial, sans-serif", 14),
            "spacing": 16,
            "borderRadius": 4,
            "shadows": "bootstrap",
        },
        components=[
            "Sidebar", "Header", "Table", "Form", "Card", "Button", "Input",
            "Select", "Modal", "Toast", "Alert", "Tabs", "Accordion",
            "Badge", "Spinner", "Progress", "Dropdown", "Pagination",
        ],
        layouts=["dashboard", "widgets", "tables", "forms", "charts"],
        dependencies={
            "@coreui/react": "^4.11.0",
            "@coreui/icons": "^3.0.1",
            "@coreui/icons-react": "^2.2.1",
            "react-bootstrap": "^2.9.0",
            "bootstrap": "^5.3.0",
        },
        assets={"fonts": ["system"], "icons": "coreui-icons"},
    ),
    UITemplate(
        id="shadcn-modern",
        name="Shadcn Modern",
        description=(
            "Beautifully designed, accessible components built with Radix UI and "
            "Tailwind. Copy-paste friendly."
        ),
        framework="Shadcn/ui",
        category="modern",
        preview={
            "thumbnail": "/templates/shadcn/thumbnail.png",
            "liveDemo": "https://ui.shadcn.com/examples/dashboard",
        },
        default_config={
            "colors": {
                "primary": "hsl(222.2 47.4% 11.2%)",
                "secondary": "hsl(210 40% 96.1%)",
                "success": "hsl(142.1 76.2% 36.3%)",
                "warning": "hsl(38 92% 50%)",
                "error": "hsl(0 84.2% 60.2%)",
                "info": "hsl(221.2 83.2% 53.3%)",
                "background": "hsl(0 0% 100%)",
                "surface": "hsl(0 0% 98%)",
                "text": {
                    "primary": "hsl(222.2 84% 4.9%)",
                    "secondary": "hsl(215.4 16.3% 46.9%)",
                },
            },
            "typography": _typography("'Inter', sans-serif", 14, bold=600),
            "spacing": 4,
            "borderRadius": 8,
            "shadows": "subtle",
        },
        components=[
            "Card", "Button", "Input", "Select", "DataTable", "Dialog",
            "DropdownMenu", "Alert", "Badge", "Tabs", "Sheet", "Command",
            "Calendar", "Form", "Separator", "Toast", "Switch", "Checkbox",
        ],
        layouts=["dashboard", "tasks", "mail", "playground", "settings"],
        dependencies={
            "@radix-ui/react-alert-dialog": "^1.0.5",
            "@radix-ui/react-dropdown-menu": "^2.0.6",
            "@radix-ui/react-select": "^2.0.0",
            "@radix-ui/react-tabs": "^1.0.4",
            "tailwindcss": "^3.4.0",
            "class-variance-authority": "^0.7.0",
            "clsx": "^2.0.0",
            "tailwind-merge": "^2.2.0",
        },
        assets={"fonts": ["Inter"], "icons": "lucide-react"},
    ),
    UITemplate(
        id="med-refills-healthcare",
        name="Med Refills Healthcare",
        description=(
            "Clean, accessible design optimized for healthcare applications. "
            "HIPAA-compliant UI patterns."
        ),
        framework="Custom Healthcare UI",
        category="healthcare",
        preview={
            "thumbnail": "/templates/med-refills/thumbnail.png",
            "liveDemo": "https://example.com/med-refills-demo",
        },
        default_config={
            "colors": {
                "primary": "#0066cc",
                "secondary": "#00a86b",
                "success": "#28a745",
                "warning": "#ffc107",
                "error": "#dc3545",
                "info": "#17a2b8",
                "background": "#f8f9fa",
                "surface": "#ffffff",
                "accent": "#6c63ff",
                "text": {"primary": "#212529", "secondary": "#6c757d"},
            },
            # larger base size and line height for readability
            "typography": _typography(
                "'Open Sans', 'Helvetica Neue', Arial, sans-serif",
                16,
                medium=600,
                lineHeight=1.6,
            ),
            "spacing": 16,
            "borderRadius": 8,
            "shadows": "soft",
            "accessibility": {
                "highContrast": True,
                "focusIndicators": True,
                "minimumTouchTarget": 44,
            },
        },
        components=[
            "PrescriptionCard", "RefillButton", "MedicationList", "DosageSchedule",
            "PharmacyLocator", "InsuranceCard", "PatientProfile", "AppointmentCard",
            "AlertBanner", "StatusBadge", "TimelineView", "ScanPrescription",
            "AutoRefillToggle", "DoctorContact", "MedicationReminder",
        ],
        layouts=[
            "patient-dashboard",
            "prescriptions-list",
            "refill-request",
            "medication-details",
            "pharmacy-selection",
            "insurance-info",
            "appointment-booking",
        ],
        dependencies={
            "@mui/material": "^5.15.0",
            "@mui/icons-material": "^5.15.0",
            "react-qr-reader": "^3.0.0-beta-1",
            "date-fns": "^2.30.0",
            "react-hook-form": "^7.49.0",
            "zod": "^3.22.0",
        },
        assets={
            "fonts": ["Open Sans"],
            "icons": "material-icons + custom-medical-icons",
            "illustrations": ["prescription-bottle", "pharmacy", "doctor", "calendar"],
        },
        special_features={
            "prescriptionScanning": True,
            "autoRefillReminders": True,
            "insuranceIntegration": True,
            "hipaaCompliant": True,
            "accessibilityAAA": True,
            "offlineMode": True,
        },
    ),
]

UI_TEMPLATES: dict[str, UITemplate] = {t.id: t for t in _TEMPLATES}


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def get_template(template_id: str) -> Optional[UITemplate]:
    """Return the template for *template_id*, or ``None`` if unregistered."""
    return UI_TEMPLATES.get(template_id)


def get_all_templates() -> list[UITemplate]:
    """All templates in declaration order."""
    return list(UI_TEMPLATES.values())


def get_templates_by_category(category: str) -> list[UITemplate]:
    return [t for t in UI_TEMPLATES.values() if t.category == category]


def get_categories() -> list[str]:
    """Distinct template categories in first-seen order."""
    return list(dict.fromkeys(t.category for t in UI_TEMPLATES.values()))


# ---------------------------------------------------------------------------
# Quick customization presets
# ---------------------------------------------------------------------------

COLOR_PALETTES: dict[str, dict[str, str]] = {
    "blue-professional": {
        "primary": "#1976d2",
        "secondary": "#dc004e",
        "success": "#4caf50",
        "warning": "#ff9800",
        "error": "#f44336",
    },
    "green-healthcare": {
        "primary": "#00a86b",
        "secondary": "#0066cc",
        "success": "#28a745",
        "warning": "#ffc107",
        "error": "#dc3545",
    },
    "purple-creative": {
        "primary": "#6c63ff",
        "secondary": "#ff6b9d",
        "success": "#00d4aa",
        "warning": "#ffb800",
        "error": "#ff6060",
    },
    "teal-modern": {
        "primary": "#14b8a6",
        "secondary": "#8b5cf6",
        "success": "#10b981",
        "warning": "#f59e0b",
        "error": "#ef4444",
    },
    "indigo-enterprise": {
        "primary": "#4f46e5",
        "secondary": "#06b6d4",
        "success": "#10b981",
        "warning": "#f59e0b",
        "error": "#ef4444",
    },
    "orange-energetic": {
        "primary": "#f97316",
        "secondary": "#3b82f6",
        "success": "#22c55e",
        "warning": "#eab308",
        "error": "#ef4444",
    },
}

FONT_COMBINATIONS: dict[str, dict[str, str]] = {
    "roboto-modern": {
        "fontFamily": "'Roboto', 'Helvetica', 'Arial', sans-serif",
        "description": "Clean and modern, perfect for data-heavy apps",
    },
    "inter-professional": {
        "fontFamily": "'Inter', sans-serif",
        "description": "Professional and highly readable",
    },
    "opensans-friendly": {
        "fontFamily": "'Open Sans', 'Helvetica Neue', Arial, sans-serif",
        "description": "Friendly and accessible, great for healthcare",
    },
    "poppins-bold": {
        "fontFamily": "'Poppins', sans-serif",
        "description": "Bold and attention-grabbing",
    },
    "lato-elegant": {
        "fontFamily": "'Lato', sans-serif",
        "description": "Elegant and versatile",
    },
    "system-native": {
        "fontFamily": "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif",
        "description": "Native system fonts for best performance",
    },
}
