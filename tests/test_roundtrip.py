"""Decode a canned GeoServer document, encode it back and decode again."""

import pytest

from geoserver_rest.codec import decode, encode
from geoserver_rest.models import (
    Datastore,
    FileBlobStore,
    GwcQuotaConfiguration,
    GwcWmsLayer,
    Layer,
    LayerGroup,
    LayerRules,
    RegexUrlCheck,
    S3BlobStore,
    Style,
    User,
    WmsLayer,
    WmsStore,
    WmtsLayer,
    WmtsStore,
    Workspace,
)

WORKSPACE = "<workspace><name>topp</name><isolated>false</isolated></workspace>"

DATASTORE = """
<dataStore>
  <name>sf</name>
  <description>Spearfish shapefiles</description>
  <type>Directory of spatial files (shapefiles)</type>
  <enabled>true</enabled>
  <workspace><name>sf</name></workspace>
  <connectionParameters>
    <entry key="url">file:data/sf</entry>
    <entry key="namespace">http://www.openplans.org/spearfish</entry>
  </connectionParameters>
  <__default>false</__default>
</dataStore>
"""

LAYER = """
<layer>
  <name>roads</name>
  <path>/</path>
  <type>VECTOR</type>
  <defaultStyle><name>simple_roads</name></defaultStyle>
  <styles class="linked-hash-set">
    <style><name>line</name></style>
    <style><name>generic</name></style>
  </styles>
  <resource class="featureType"><name>sf:roads</name></resource>
  <opaque>false</opaque>
  <metadata><entry key="buffer">10</entry></metadata>
  <attribution>
    <title>USGS</title>
    <href>https://usgs.gov</href>
    <logoURL>https://usgs.gov/logo.png</logoURL>
    <logoWidth>64</logoWidth>
    <logoHeight>32</logoHeight>
    <logoType>image/png</logoType>
  </attribution>
</layer>
"""

LAYER_GROUP = """
<layerGroup>
  <name>spearfish</name>
  <workspace><name>sf</name></workspace>
  <mode>SINGLE</mode>
  <title>Spearfish</title>
  <abstractTxt>Roads and streams</abstractTxt>
  <publishables>
    <published type="layer"><name>sf:roads</name></published>
    <published type="layer"><name>sf:streams</name></published>
  </publishables>
  <styles><style><name>line</name></style><style><name>line</name></style></styles>
  <bounds>
    <minx>589434.8564686741</minx>
    <maxx>609527.2102150217</maxx>
    <miny>4914006.337837095</miny>
    <maxy>4928063.398014731</maxy>
    <crs class="projected">EPSG:26713</crs>
  </bounds>
  <metadataLinks>
    <metadataLink><type>text/xml</type><metadataType>ISO19115:2003</metadataType><content>https://md/1</content></metadataLink>
  </metadataLinks>
  <keywords><string>roads</string><string>streams</string></keywords>
</layerGroup>
"""

STYLE = """
<style>
  <name>roads</name>
  <workspace><name>sf</name></workspace>
  <format>sld</format>
  <languageVersion><version>1.0.0</version></languageVersion>
  <filename>roads.sld</filename>
</style>
"""

WMS_STORE = """
<wmsStore>
  <name>remote</name>
  <description>Cascaded</description>
  <type>WMS</type>
  <enabled>true</enabled>
  <workspace><name>topp</name></workspace>
  <__default>false</__default>
  <disableOnConnFailure>true</disableOnConnFailure>
  <capabilitiesURL>https://demo.test/wms?request=GetCapabilities&amp;service=WMS</capabilitiesURL>
  <maxConnections>6</maxConnections>
  <readTimeout>60</readTimeout>
  <connectTimeout>30</connectTimeout>
</wmsStore>
"""

WMTS_STORE = """
<wmtsStore>
  <name>tiles</name>
  <type>WMTS</type>
  <enabled>true</enabled>
  <workspace><name>topp</name></workspace>
  <capabilitiesURL>https://demo.test/wmts/1.0.0/WMTSCapabilities.xml</capabilitiesURL>
  <maxConnections>4</maxConnections>
</wmtsStore>
"""

REMOTE_LAYER = """
<{tag}>
  <name>states</name>
  <nativeName>topp:states</nativeName>
  <title>USA Population</title>
  <abstract>States of the USA</abstract>
  <nativeCRS>EPSG:4326</nativeCRS>
  <srs>EPSG:4326</srs>
  <nativeBoundingBox>
    <minx>-124.73142200000001</minx><maxx>-66.969849</maxx>
    <miny>24.955967</miny><maxy>49.371735</maxy>
    <crs>EPSG:4326</crs>
  </nativeBoundingBox>
  <latLonBoundingBox>
    <minx>-124.731422</minx><maxx>-66.969849</maxx>
    <miny>24.955967</miny><maxy>49.371735</maxy>
    <crs>EPSG:4326</crs>
  </latLonBoundingBox>
  <projectionPolicy>FORCE_DECLARED</projectionPolicy>
  <enabled>true</enabled>
  <metadata>
    <entry key="cachingEnabled">false</entry>
    <entry key="time"><dimensionInfo><enabled>false</enabled></dimensionInfo></entry>
  </metadata>
</{tag}>
"""

FILE_BLOBSTORE = """
<FileBlobStore>
  <id>local</id>
  <enabled>true</enabled>
  <baseDirectory>/var/cache/gwc</baseDirectory>
  <fileSystemBlockSize>4096</fileSystemBlockSize>
</FileBlobStore>
"""

S3_BLOBSTORE = """
<S3BlobStore>
  <id>s3</id>
  <bucket>tiles</bucket>
  <prefix>gwc</prefix>
  <awsAccessKey>AKIA</awsAccessKey>
  <awsSecretKey>secret</awsSecretKey>
  <access>PRIVATE</access>
  <endpoint>https://s3.test</endpoint>
  <maxConnections>50</maxConnections>
  <useHTTPS>true</useHTTPS>
  <useGzip>false</useGzip>
  <enabled>true</enabled>
  <__default>false</__default>
</S3BlobStore>
"""

QUOTA = """
<gwcQuotaConfiguration>
  <enabled>true</enabled>
  <cacheCleanUpFrequency>10</cacheCleanUpFrequency>
  <cacheCleanUpUnits>SECONDS</cacheCleanUpUnits>
  <maxConcurrentCleanUps>2</maxConcurrentCleanUps>
  <globalExpirationPolicyName>LFU</globalExpirationPolicyName>
  <globalQuota><value>500</value><units>MiB</units></globalQuota>
  <layerQuotas>
    <LayerQuota>
      <layer>topp:states</layer>
      <expirationPolicyName>LRU</expirationPolicyName>
      <quota><value>100</value><units>MiB</units></quota>
    </LayerQuota>
  </layerQuotas>
</gwcQuotaConfiguration>
"""

GWC_WMS_LAYER = """
<wmsLayer>
  <name>img states</name>
  <enabled>true</enabled>
  <blobStoreId>local</blobStoreId>
  <mimeFormats><string>image/png</string><string>image/jpeg</string></mimeFormats>
  <gridSubsets>
    <gridSubset><gridSetName>EPSG:4326</gridSetName><minCachedLevel>0</minCachedLevel><maxCachedLevel>10</maxCachedLevel></gridSubset>
  </gridSubsets>
  <metaWidthHeight><int>3</int><int>3</int></metaWidthHeight>
  <expireCache>0</expireCache>
  <expireClients>0</expireClients>
  <gutter>0</gutter>
  <backendTimeout>120</backendTimeout>
  <cacheBypassAllowed>false</cacheBypassAllowed>
  <wmsUrl><string>http://demo.test/geoserver/wms</string></wmsUrl>
  <wmsLayers>nurc:Img_Sample,topp:states</wmsLayers>
  <wmsVersion>1.1.1</wmsVersion>
  <vendorParameters>tiled=true</vendorParameters>
  <transparent>false</transparent>
  <bgColor>0x0066FF</bgColor>
</wmsLayer>
"""

URL_CHECK = """
<regexUrlCheck>
  <name>icons</name>
  <description>External icons</description>
  <regex>^https://icons\\.test/.*$</regex>
  <enabled>true</enabled>
</regexUrlCheck>
"""

USER = "<user><userName>alice</userName><password>secret</password><enabled>true</enabled></user>"

LAYER_RULES = (
    "<rules>"
    '<rule resource="*.*.r">*</rule>'
    '<rule resource="topp.states.w">ROLE_EDITOR,ROLE_ADMIN</rule>'
    "</rules>"
)


@pytest.mark.parametrize(
    "model,body",
    [
        (Workspace, WORKSPACE),
        (Datastore, DATASTORE),
        (Layer, LAYER),
        (LayerGroup, LAYER_GROUP),
        (Style, STYLE),
        (WmsStore, WMS_STORE),
        (WmtsStore, WMTS_STORE),
        (WmsLayer, REMOTE_LAYER.format(tag="wmsLayer")),
        (WmtsLayer, REMOTE_LAYER.format(tag="wmtsLayer")),
        (FileBlobStore, FILE_BLOBSTORE),
        (S3BlobStore, S3_BLOBSTORE),
        (GwcQuotaConfiguration, QUOTA),
        (GwcWmsLayer, GWC_WMS_LAYER),
        (RegexUrlCheck, URL_CHECK),
        (User, USER),
        (LayerRules, LAYER_RULES),
    ],
    ids=lambda value: value.__name__ if isinstance(value, type) else None,
)
def test_decode_encode_decode_is_stable(model, body):
    decoded = decode(model, body)
    again = decode(model, encode(decoded))

    assert again == decoded
    assert again.model_dump(exclude_defaults=True)


def test_layer_keeps_style_set_class_and_resource_class():
    layer = decode(Layer, encode(decode(Layer, LAYER)))

    assert layer.styles.collection_class == "linked-hash-set"
    assert [s.name for s in layer.styles.styles] == ["line", "generic"]
    assert layer.resource.resource_class == "featureType"
    assert layer.attribution.logo_width == 64


def test_remote_layer_keeps_nested_metadata():
    wms_layer = decode(WmsLayer, encode(decode(WmsLayer, REMOTE_LAYER.format(tag="wmsLayer"))))

    assert wms_layer.metadata[1].value == "<dimensionInfo><enabled>false</enabled></dimensionInfo>"
    assert wms_layer.lat_lon_bounding_box.minx == -124.731422
