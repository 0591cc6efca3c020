"""Usage text for the dswe command."""

from __future__ import annotations

from .config import DEFAULTS, DsweConfig


def format_usage(defaults: DsweConfig = DEFAULTS) -> str:
    return (
        "Dynamic Surface Water Extent\n"
        "Determines and builds surface water extent output bands from surface\n"
        "reflectance input data in ESPA raw binary format.\n"
        "\n"
        "usage: dswe --xml <input_xml_filename> [--help]\n"
        "\n"
        "where the following parameters are required:\n"
        "    --xml: name of the input XML file which contains the surface reflectance,\n"
        "           and top of atmos files output from LEDAPS in raw binary\n"
        "           (envi) format\n"
        "where the following parameters are optional:\n"
        "    --wigt: Modified Normalized Difference Wetness Index Threshold between"
        f" 0.00 and 2.00 (default value is {defaults.wigt:0.3f})\n"
        "    --awgt: Automated Water Extent Shadow Threshold between -2.00 and 2.00"
        f" (default value is {defaults.awgt:0.2f})\n"
        "    --pswt: Partial Surface Water Threshold between -2.00 and 2.00"
        f" (default value is {defaults.pswt:0.2f})\n"
        "    --pswnt: Partial Surface Water NIR Threshold between 0 and data maximum"
        f" (default value is {defaults.pswnt:d})\n"
        "    --pswst: Partial Surface Water SWIR1 Threshold between 0 and data maximum"
        f" (default value is {defaults.pswst:d})\n"
        "    --percent-slope: Threshold between 0.00 and 100.00"
        f" (default value is {defaults.percent_slope:0.1f})\n"
        "    --use-ledaps-mask: should ledaps cloud/shadow mask be used? (default is\n"
        "                       false, meaning fmask cloud/shadow will be used)\n"
        "    --use-zeven-thorne: should Zevenbergen&Thorne's shaded algorithm be used?\n"
        "                        (default is false, meaning Horn's shaded algorithm will\n"
        "                        be used)\n"
        "    --use-toa: should Top of Atmosphere be used instead of Surface Reflectance\n"
        "               (default is false, meaning Surface Reflectance will be used)\n"
        "    --verbose: should intermediate messages be printed? (default is false)\n"
        "\n"
        "dswe --help will print this usage statement\n"
        "\n"
        "Example: dswe --xml LE70760172000175AGS00.xml\n"
    )


USAGE = format_usage()

__all__ = ["USAGE", "format_usage"]
