"""
Serverless spec builder.

Translates a provider-agnostic serverless description (f.yml) into a
deployment template for Aliyun Function Compute.
"""

from .fc.builder import FCSpecBuilder, build_fc_template, convert_methods

__all__ = ["FCSpecBuilder", "build_fc_template", "convert_methods"]
