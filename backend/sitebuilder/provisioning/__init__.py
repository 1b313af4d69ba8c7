from .provisioner import DEFAULT_TEMPLATE_SUBDOMAIN, ProvisionReport, TemplateProvisioner

__all__ = ["DEFAULT_TEMPLATE_SUBDOMAIN", "ProvisionReport", "TemplateProvisioner"]
