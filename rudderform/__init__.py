"""Mapping between RudderStack API configs and Terraform state, with HCL generation."""

__version__ = "3.0.0"