import xml.etree.ElementTree as ET

from .models import PackageManifest

NS = {
    "": "http://www.imsproject.org/xsd/imscp_rootv1p1p2",
    "adlcp": "http://www.adlnet.org/xsd/adlcp_rootv1p2",
    "xsi": "http://www.w3.org/2001/XMLSchema-instance",
}

SCHEMA_LOCATION = (
    "http://www.imsproject.org/xsd/imscp_rootv1p1p2 imscp_rootv1p1p2.xsd "
    "http://www.imsglobal.org/xsd/imsmd_rootv1p2p1 imsmd_rootv1p2p1.xsd "
    "http://www.adlnet.org/xsd/adlcp_rootv1p2 adlcp_rootv1p2.xsd"
)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

for _prefix, _uri in NS.items():
    ET.register_namespace(_prefix, _uri)


def _cp(tag):
    return "{%s}%s" % (NS[""], tag)


def generate(manifest: PackageManifest) -> str:
    """Render ``imsmanifest.xml`` for a single-SCO SCORM 1.2 package.

    Built as a tree, so titles and paths containing ``&``, ``<`` or quotes
    come out escaped.
    """
    root = ET.Element(_cp("manifest"), {
        "identifier": manifest.identifier,
        "version": "1.2",
        "{%s}schemaLocation" % NS["xsi"]: SCHEMA_LOCATION,
    })

    metadata = ET.SubElement(root, _cp("metadata"))
    ET.SubElement(metadata, _cp("schema")).text = "ADL SCORM"
    ET.SubElement(metadata, _cp("schemaversion")).text = "1.2"

    organizations = ET.SubElement(root, _cp("organizations"), {"default": manifest.organization_id})
    org = ET.SubElement(organizations, _cp("organization"), {"identifier": manifest.organization_id})
    ET.SubElement(org, _cp("title")).text = manifest.title
    item = ET.SubElement(org, _cp("item"), {
        "identifier": manifest.item_id,
        "identifierref": manifest.resource_id,
        "isvisible": "true",
    })
    ET.SubElement(item, _cp("title")).text = manifest.title

    resources = ET.SubElement(root, _cp("resources"))
    res = ET.SubElement(resources, _cp("resource"), {
        "identifier": manifest.resource_id,
        "type": "webcontent",
        "{%s}scormtype" % NS["adlcp"]: "sco",
        "href": manifest.entry_href,
    })
    ET.SubElement(res, _cp("file"), {"href": manifest.entry_href})
    for path in manifest.files:
        if path != manifest.entry_href:
            ET.SubElement(res, _cp("file"), {"href": path})

    ET.indent(root, space="  ")
    return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"
