"""
Static site metadata used by the tier resolver.

SPECIFIC_SITES maps each site with a dedicated extractor to the host pattern
it owns and the path markers that identify its product pages.
WHITELIST_SITES lists known e-commerce domains handled by the generic
extractor. NON_ECOMMERCE_DOMAINS and ECOMMERCE_DOMAINS short-circuit the
document scoring used for unknown domains.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SpecificSite:
    """A site served by a dedicated extractor."""

    name: str
    host_pattern: re.Pattern
    product_markers: tuple[str, ...] = ()

    def matches(self, host: str) -> bool:
        return bool(self.host_pattern.search(host))


# Priority order: the first matching site wins
SPECIFIC_SITES: tuple[SpecificSite, ...] = (
    SpecificSite(
        name="amazon",
        host_pattern=re.compile(r"(^|\.)amazon\.[a-z.]+$"),
        product_markers=("/dp/", "/gp/product/", "/product/"),
    ),
    SpecificSite(
        name="ebay",
        host_pattern=re.compile(r"(^|\.)ebay\.[a-z.]+$"),
        product_markers=("/itm/", "/p/"),
    ),
    SpecificSite(
        name="aliexpress",
        host_pattern=re.compile(r"(^|\.)aliexpress\.[a-z.]+$"),
        product_markers=("/item/",),
    ),
    SpecificSite(
        name="pccomponentes",
        host_pattern=re.compile(r"(^|\.)pccomponentes\.(com|pt|fr|it)$"),
    ),
    SpecificSite(
        name="mediamarkt",
        host_pattern=re.compile(r"(^|\.)mediamarkt\.[a-z.]+$"),
        product_markers=("/product/",),
    ),
)


def get_specific_site(name: str) -> SpecificSite | None:
    for site in SPECIFIC_SITES:
        if site.name == name:
            return site
    return None


# Known non-store domains: never tracked
NON_ECOMMERCE_DOMAINS = frozenset({
    # Search engines
    "google.com", "bing.com", "yahoo.com", "duckduckgo.com", "baidu.com",
    # Social media
    "facebook.com", "instagram.com", "twitter.com", "x.com", "linkedin.com",
    "pinterest.com", "reddit.com", "tiktok.com", "snapchat.com",
    # Video platforms
    "youtube.com", "vimeo.com", "twitch.tv", "dailymotion.com",
    # Email & productivity
    "gmail.com", "outlook.com", "mail.google.com", "docs.google.com",
    "drive.google.com", "dropbox.com",
    # Development
    "github.com", "gitlab.com", "bitbucket.org", "stackoverflow.com",
    "stackexchange.com",
    # News & media
    "wikipedia.org", "medium.com", "dev.to", "news.ycombinator.com",
    # Other
    "localhost", "127.0.0.1",
})

# Known stores that skip document scoring
ECOMMERCE_DOMAINS = frozenset({
    "pccomponentes.com", "mediamarkt.es", "elcorteingles.es", "carrefour.es",
    "fnac.es", "worten.es", "coolmod.com", "aussar.es", "wallapop.com",
    "etsy.com", "walmart.com", "target.com", "bestbuy.com", "newegg.com",
    "bhphotovideo.com",
    "zara.com", "hm.com", "asos.com", "zalando.es", "shein.com",
    "apple.com", "microsoft.com", "dell.com", "hp.com", "lenovo.com",
})

# domain -> store name
WHITELIST_SITES: dict[str, str] = {
    "11.11deals.com": "11.11",
    "11st.co.kr": "11st",
    "1688.com": "1688",
    "aboutyou.de": "About You",
    "action.com": "Action",
    "adidas.com": "Adidas (tienda global)",
    "adidas.es": "Adidas (España)",
    "afrabuy.com": "Afrabuy",
    "agapea.com": "Agapea",
    "ah.nl": "Albert Heijn",
    "ajio.com": "Ajio",
    "alcampo.es": "Alcampo",
    "alibaba.com": "Alibaba.com",
    "aliexpress.com": "AliExpress US",
    "aliexpress.pl": "AliExpress Polonia",
    "aliexpress.ru": "AliExpress Rusia",
    "alkosto.com": "Alkosto",
    "allegro.cz": "Allegro Chequia",
    "allegro.pl": "Allegro",
    "alternate.de": "Alternate",
    "amazon.ae": "Amazon Emiratos",
    "amazon.ca": "Amazon Canadá",
    "amazon.co.jp": "Amazon Japón",
    "amazon.co.uk": "Amazon Reino Unido",
    "amazon.com": "Amazon (US)",
    "amazon.com.ar": "Amazon.com.ar",
    "amazon.com.br": "Amazon Brasil",
    "amazon.com.mx": "Amazon México",
    "amazon.com.tr": "Amazon Turquía",
    "amazon.de": "Amazon Alemania",
    "amazon.eg": "Amazon Egipto",
    "amazon.es": "Amazon España",
    "amazon.fr": "Amazon Francia",
    "amazon.in": "Amazon India",
    "amazon.it": "Amazon Italia",
    "amazon.nl": "Amazon (otros Europa)",
    "amazon.pl": "Amazon Polonia",
    "amazon.sa": "Amazon Arabia Saudí",
    "amazon.sg": "Amazon Singapur",
    "americanas.com.br": "Americanas",
    "apple.com": "Apple (US)",
    "ar.aliexpress.com": "AliExpress MENA",
    "argos.co.uk": "Argos",
    "asos.com": "ASOS (EU)",
    "atresplayer.com": "Atresplayer",
    "auction.co.kr": "Auction",
    "auctions.yahoo.co.jp": "Yahoo Auctions JP",
    "autocasion.com": "Autocasion",
    "autos.mercadolibre.com": "ML Autos (clasificados)",
    "autotrader.com": "AutoTrader",
    "avechi.com": "Avechi",
    "avito.ru": "Avito",
    "avon.com.br": "Avon Brasil",
    "b2brasil.com.br": "B2Brazil",
    "banggood.com": "Banggood",
    "bauhaus.es": "Bauhaus España",
    "bauhaus.info": "Bauhaus DE",
    "bestbuy.ca": "Best Buy Canadá",
    "bestbuy.com": "Best Buy",
    "bhphotovideo.com": "B&H Photo",
    "biccamera.com": "Bic Camera",
    "bidibiz.com": "Bidibiz",
    "bigbasket.com": "BigBasket",
    "bigcommerce.com": "BigCommerce",
    "bijenkorf.nl": "De Bijenkorf",
    "bimbaylola.com": "Bimba y Lola",
    "bip.cl": "Bip",
    "blibli.com": "Blibli",
    "blinkit.com": "Blinkit",
    "bmo.com": "BMO",
    "bobshop.co.za": "Bidorbuy (Bob Shop)",
    "bodegaaurrera.com.mx": "Bodega Aurrera",
    "bol.com": "Bol.com",
    "bonprix.de": "Bonprix",
    "bonprix.es": "Bonprix",
    "bookdepository.com": "BookDepository",
    "booking.com": "Booking",
    "boots.com": "Boots",
    "boulanger.com": "Boulanger",
    "bricodepot.com.mx": "Brico Depot",
    "bricodepot.es": "Bricodepot",
    "bricomart.es": "Bricomart",
    "brocchi.com.ar": "Brocchi",
    "bukalapak.com": "Bukalapak",
    "burberry.com": "Burberry",
    "buscape.com.br": "Buscapé",
    "c-and-a.com": "C&A",
    "calvinklein.com": "Calvin Klein",
    "camarero.es": "Camarero.es",
    "canadiantire.ca": "Canadian Tire",
    "carousell.com": "Carousell",
    "carrefour.com.ar": "Carrefour.com.ar",
    "carrefour.com.br": "Carrefour Brasil",
    "carrefour.com.co": "Carrefour.com.co",
    "carrefour.es": "Carrefour España",
    "carrefour.fr": "Carrefour Francia",
    "carrefour.ma": "Carrefour.ma",
    "carvana.com": "Carvana",
    "casadellibro.com": "Casa del Libro",
    "casasbahia.com.br": "Casas Bahia (Via)",
    "cashify.com": "Cashify",
    "cdiscount.com": "Cdiscount",
    "ceneo.pl": "Ceneo",
    "chanel.com": "Chanel",
    "checkers.co.za": "Checkers",
    "chewy.com": "Chewy",
    "chollometro.com": "Chollometro",
    "chotot.com": "Chotot",
    "chrono24.com": "Chrono24",
    "cibc.com": "CIBC",
    "cjonstyle.com": "CJ OnStyle",
    "claroshop.com": "Claro Shop",
    "clicks.co.za": "Clicks",
    "compro.com.pe": "Compro",
    "compumundo.com": "Compumundo",
    "conforama.es": "Conforama",
    "conforama.fr": "Conforama FR",
    "conrad.de": "Conrad",
    "consumer.huawei.com": "Huawei España",
    "continente.pt": "Continente",
    "coolbeats.es": "Coolbeats",
    "coolblue.be": "Coolblue.be",
    "coolblue.nl": "Coolblue",
    "coolmod.com": "Coolmod",
    "coolshop.dk": "Coolshop",
    "coppel.com": "Coppel",
    "corona.com.co": "Corona.com.co",
    "costco.ca": "Costco Canadá",
    "costco.com": "Costco",
    "costco.com.mx": "Costco",
    "coupang.com": "Coupang",
    "craigslist.org": "Craigslist",
    "currys.co.uk": "Currys",
    "cvs.com": "CVS",
    "cyberport.de": "Cyberport",
    "d1.com.co": "D1",
    "dafiti.cl": "Dafiti CL",
    "dafiti.com.ar": "Dafiti AR",
    "dafiti.com.br": "Dafiti",
    "dangdang.com": "Dangdang",
    "daraz.pk": "Daraz",
    "darty.com": "Darty",
    "debijenkorf.nl": "De Bijenkorf",
    "decathlon.com": "Decathlon Internacional",
    "decathlon.es": "Decathlon España",
    "decathlon.fr": "Decathlon.fr",
    "decathlon.nl": "Decathlon",
    "dell.com": "Dell",
    "despegar.com": "Despegar",
    "dhgate.com": "DHgate",
    "dia.com.co": "Día",
    "dia.es": "Supermercados DIA Online",
    "dianping.com": "Dianping",
    "dickssportinggoods.com": "Dick's Sporting Goods",
    "digikala.com": "Digikala",
    "digitec.ch": "Digitec Galaxus",
    "dior.com": "Dior",
    "dischem.co.za": "Dis-Chem",
    "disco.com.ar": "Disco",
    "discogs.com": "Discogs",
    "diy.com": "B&Q",
    "donagapito.com": "Don Agapito",
    "doordash.com": "DoorDash",
    "douglas.de": "Douglas DE",
    "douglas.es": "Douglas España",
    "douyin.com": "Douyin Shop",
    "druni.es": "Druni",
    "dunelm.com": "Dunelm",
    "e-leclerc.com": "Leclerc",
    "ea.com": "EA Store",
    "easy.cl": "Easy Chile",
    "easy.com.co": "Easy.co",
    "ebay.ca": "eBay Canadá",
    "ebay.co.uk": "eBay Reino Unido",
    "ebay.com": "eBay (US)",
    "ebay.de": "eBay Alemania",
    "ebay.es": "eBay España",
    "ebay.fr": "eBay Francia",
    "ebay.in": "eBay India",
    "ebay.it": "eBay Italia",
    "ebayclassifieds.com": "Ebay Classifieds",
    "elcorteingles.com": "El Corte Inglés Internacional",
    "elcorteingles.es": "El Corte Inglés",
    "electrochoice.cl": "Electrochoice",
    "electrodomesticos.net": "Electrodomésticos.net",
    "electroplanet.fr": "Electroplanet",
    "elektra.com.mx": "Elektra",
    "elo7.com.br": "Elo7",
    "elpalacio.com.mx": "El Palacio",
    "emag.bg": "eMAG Bulgaria",
    "emag.ro": "eMAG",
    "empik.com": "Empik",
    "enjoei.com.br": "Enjoei",
    "eprice.it": "Eprice",
    "eroski.es": "Eroski",
    "etsy.com": "Etsy",
    "euro.com.pl": "RTV Euro AGD",
    "euronics.it": "Euronics",
    "exito.com": "Exito",
    "facebook.com": "Facebook Marketplace US",
    "falabella.com": "Falabella",
    "falabella.com.co": "Falabella Colombia",
    "falabella.com.pe": "Falabella Perú",
    "farfetch.com": "Farfetch",
    "farmacias.com": "Farmacias.com",
    "farmaciasguadalajara.com.mx": "Farmacias Guadalajara",
    "farmaciasurtidor.com.ar": "Farmacia del Dr Surtidor",
    "farmalastic.com": "Farmalastic",
    "firstcry.com": "FirstCry",
    "flamingos.co": "Flamingos",
    "flatpyramid.com": "Flatpyramid",
    "flipkart.com": "Flipkart",
    "fnac.com": "Fnac",
    "fnac.es": "Fnac España",
    "food.jumia.com": "Jumia Food",
    "forever21.com": "Forever 21",
    "fravega.cl": "Frávega.cl",
    "fravega.com": "Fravega",
    "funidelia.com": "Funidelia",
    "galerieslafayette.com": "Galeries Lafayette",
    "game.co.uk": "Game UK",
    "game.co.za": "Game",
    "game.es": "Game España",
    "gap.co.jp": "Gap Japan",
    "gap.com": "Gap",
    "garbarino.com": "Garbarino",
    "gearbest.com": "Gearbest",
    "geekbuying.com": "Geekbuying",
    "glovoapp.com": "Glovo",
    "gmarket.co.kr": "Gmarket",
    "goliat.es": "Goliat",
    "gomes.com.cn": "GOMES",
    "gorgas.es": "Gorgas",
    "grocery.walmart.com": "Walmart Grocery",
    "grofers.com": "Grofers",
    "groupon.com": "Groupon",
    "groupon.es": "Groupon.es",
    "grubhub.com": "Grubhub",
    "gucci.com": "Gucci",
    "gumtree.co.za": "Gumtree.co.za",
    "heb.com": "H-E-B",
    "hema.nl": "Hema",
    "hepsiburada.com": "Hepsiburada",
    "hermes.com": "Hermès",
    "hificorp.co.za": "HiFi Corp",
    "hipercor.es": "Hipercor",
    "hm.com": "H&M (España)",
    "hmall.com": "Hmall",
    "hofmann.es": "Hofmann",
    "homecenter.com.cl": "Homecenter.com.cl",
    "homecenter.com.co": "Homecenter.com.co",
    "homecenter.com.mx": "HOME",
    "homedepot.ca": "Home Depot Canadá",
    "homedepot.com": "Home Depot",
    "homedepot.com.mx": "Home Depot México",
    "homzmart.com": "Homzmart",
    "hp.com": "HP Store",
    "hubtel.com": "Hubtel",
    "iberia.com": "Iberia",
    "ikea.com": "Ikea España",
    "incredible.co.za": "Incredible Connection",
    "indigo.ca": "Indigo",
    "infiniton.es": "Infiniton",
    "inmuebles.mercadolibre.com": "ML Inmuebles",
    "instacart.com": "Instacart",
    "instamart.com": "Instamart",
    "interpark.com": "Interpark",
    "intra.com.co": "Intra.com.co",
    "jarir.com": "Jarir",
    "jazztel.es": "Jazztel",
    "jd.com": "JD.com",
    "jd.hk": "JD Worldwide",
    "jiji.co.ke": "Jiji Kenia",
    "jiji.ng": "Jiji",
    "johnlewis.com": "John Lewis",
    "jollychic.com": "JollyChic",
    "joybuy.com": "JoyBuy",
    "jumbo.cl": "Jumbo.cl",
    "jumbo.com.ar": "Jumbo",
    "jumbo.com.pe": "Jumbo.com.pe",
    "jumbo.nl": "Jumbo",
    "jumia.ci": "Jumia Côte d’Ivoire",
    "jumia.co.ke": "Jumia Kenia",
    "jumia.com": "Jumia",
    "jumia.com.eg": "Jumia Egipto",
    "jumia.com.gh": "Jumia Ghana",
    "jumia.com.ma": "Jumia.com.ma",
    "jumia.com.ng": "Jumia.com.ng",
    "jumia.ma": "Jumia Marruecos",
    "just-eat.es": "Just Eat",
    "justeat.es": "Just Eat",
    "kaola.com": "Kaola",
    "kaufland.de": "Kaufland.de",
    "kiabi.es": "Kiabi",
    "kilimall.co.ke": "Kilimall",
    "kilimall.com": "Kilimall.com",
    "kilimall.ug": "Kilimall Uganda",
    "kleinanzeigen.de": "Kleinanzeigen",
    "kohls.com": "Kohl’s",
    "konga.com": "Konga",
    "kroger.com": "Kroger",
    "labelavie.ma": "Label'Vie",
    "lapolar.cl": "La Polar",
    "laredoute.es": "La Redoute",
    "laredoute.fr": "La Redoute",
    "latiendaencasa.es": "La Tienda en Casa",
    "lazada.co.th": "Lazada Tailandia",
    "lazada.com": "Lazada",
    "lazada.com.ph": "Lazada Filipinas",
    "lazada.kr": "Lazada.kr",
    "lazada.vn": "Lazada Vietnam",
    "leboncoin.fr": "Leboncoin",
    "lefties.com": "Lefties",
    "lelong.my": "Lelong",
    "lenskart.com": "Lenskart",
    "leroymerlin.es": "Leroy Merlin",
    "leroymerlin.fr": "Leroy Merlin FR",
    "leroymerlin.it": "Leroy Merlin",
    "letgo.com": "Letgo",
    "levi.com": "Levi's",
    "lg.com": "LG España",
    "lidl.es": "Lidl Tienda Online",
    "lidl.fr": "Lidl.fr",
    "lightinthebox.com": "LightInTheBox",
    "line.me": "Line Shopping",
    "linio.cl": "Linio Chile",
    "linio.com": "Linio",
    "linio.com.co": "Linio Colombia",
    "linio.com.mx": "Linio México",
    "linio.com.pe": "Linio Perú",
    "liverpool.com.mx": "Liverpool",
    "livingsocial.es": "LivingSocial",
    "londondrugs.com": "London Drugs",
    "loot.co.za": "Loot",
    "lotte.com": "Lotte.com",
    "louisvuitton.com": "Louis Vuitton",
    "lowes.com": "Lowe’s",
    "lululemon.com": "Lululemon",
    "luxottica.com": "Luxottica",
    "m.aliexpress.com": "AliExpress (Móvil)",
    "m.takealot.com": "Takealot (móvil)",
    "macys.com": "Macy’s",
    "magazineluiza.com.br": "Magazine Luiza",
    "makro.co.za": "Makro",
    "makro.com.pe": "Makro.com.pe",
    "mall.cz": "Mall.cz",
    "mallforafrica.com": "MallforAfrica",
    "mango.com": "Mango",
    "manomano.fr": "ManoMano",
    "manomano.it": "ManoMano IT",
    "marionnaud.fr": "Marionnaud",
    "marjane.ma": "Marjane.ma",
    "market.yandex.ru": "Yandex Market",
    "marksandspencer.com": "Marks & Spencer",
    "marktplaats.nl": "Marktplaats",
    "masdiscount.es": "Masdisccount",
    "masoko.com": "Masoko",
    "massimodutti.com": "Massimodutti",
    "mayoral.com": "Mayoral",
    "mediaexpert.pl": "Media Expert",
    "mediamarkt.de": "MediaMarkt DE",
    "mediamarkt.es": "MediaMarkt España",
    "mediamarkt.nl": "Mediamarkt",
    "mediamarkt.pl": "MediaMarkt Polonia",
    "mediaworld.it": "MediaWorld",
    "meesho.com": "Meesho",
    "meituan.com": "Meituan",
    "mercado.com.pe": "Mercado",
    "mercadofitness.com": "Mercado Fitness",
    "mercadolibre.cl": "Mercado Libre Chile",
    "mercadolibre.com": "Mercado Libre (portal)",
    "mercadolibre.com.ar": "Mercado Libre Argentina",
    "mercadolibre.com.co": "Mercado Libre Colombia",
    "mercadolibre.com.mx": "Mercado Libre México",
    "mercadolibre.com.pe": "Mercado Libre Perú",
    "mercadolibre.com.uy": "Mercado Libre Uruguay",
    "mercadolibre.com.ve": "Mercado Libre Venezuela",
    "mercadolivre.com.br": "Mercado Livre Brasil",
    "mercadona.es": "Mercadona Online",
    "mercari.com": "Mercari US",
    "metro.de": "Metro.de",
    "mi.com": "Xiaomi España",
    "microcenter.com": "Micro Center",
    "microsoft.com": "Microsoft Store",
    "mifarma.es": "Mifarma",
    "mikel.es": "Mikel",
    "milanuncios.com": "Milanuncios",
    "miravia.es": "Miravia",
    "modivo.pl": "Modivo",
    "mogujie.com": "Mogujie",
    "monoprix.fr": "Monoprix",
    "morele.net": "Morele",
    "moto.com.ar": "Moto.com.ar",
    "movistar.es": "Movistar",
    "musimundo.com": "Musimundo",
    "musimundochile.cl": "Musimundo.cl",
    "myntra.com": "Myntra",
    "n11.com": "N11",
    "namshi.com": "Namshi",
    "natura.com.br": "Natura",
    "neimanmarcus.com": "Neiman Marcus",
    "netflix.com": "Netflix",
    "netshoes.com.br": "Netshoes BR",
    "newegg.ca": "Newegg Canadá",
    "newegg.com": "Newegg",
    "next.co.uk": "Next",
    "nike.com": "Nike (España)",
    "nitori.co.jp": "Nitori",
    "njangi.com": "Njangi",
    "noon.com": "Noon",
    "nordstrom.com": "Nordstrom",
    "notebooksbilliger.de": "Notebooksbilliger",
    "notino.it": "Notino",
    "notonthehighstreet.com": "NotOnTheHighStreet",
    "nuuvem.com.br": "Nuuvem",
    "nykaa.com": "Nykaa",
    "ocado.com": "Ocado",
    "oechsle.pe": "Oechsle",
    "offerup.com": "OfferUp",
    "oldnavy.com": "Old Navy",
    "olx.cl": "OLX",
    "olx.co.ke": "OLX.co.ke",
    "olx.com": "OLX",
    "olx.com.ar": "OLX Argentina",
    "olx.com.br": "OLX Brasil",
    "olx.com.co": "OLX Colombia",
    "olx.com.eg": "OLX.com.eg",
    "olx.com.ma": "OLX.com.ma",
    "olx.com.ng": "OLX.com.ng",
    "olx.com.pe": "OLX Perú",
    "olx.com.pk": "OLX Pakistán",
    "olx.in": "OLX India",
    "olx.pl": "OLX Europa",
    "olx.ua": "OLX UA",
    "onedayonly.co.za": "OneDayOnly",
    "orange.es": "Orange España",
    "oscaro.com": "Oscaro",
    "otto.de": "OTTO",
    "overstock.com": "Overstock",
    "oxxo.com": "OXXO",
    "ozon.kz": "Ozon Kazajistán",
    "ozon.ru": "Ozon",
    "palaciodehierro.com.mx": "Palacio de Hierro",
    "pandora.net": "Pandora",
    "paris.cl": "Paris.cl",
    "payporte.com": "PayPorte",
    "paytmmall.com": "Paytm Mall",
    "pcbox.com": "PCBox",
    "pccomponentes.com": "PCComponentes",
    "pepco.es": "Pepco España",
    "petco.com": "Petco",
    "pigiame.co.ke": "PigiaMe",
    "pinduoduo.com": "Pinduoduo",
    "platanitos.cl": "Platanitos",
    "platanitos.co": "Platanitos.co",
    "playstation.com": "PlayStation Store",
    "plazavea.com.pe": "Plaza Vea",
    "pomelo.com": "Pomelo Fashion",
    "pontofrio.com.br": "Pontofrio (Via)",
    "poshmark.com": "Poshmark",
    "prada.com": "Prada",
    "prestashop.com": "Prestashop",
    "primark.com": "Primark (España)",
    "primor.eu": "Primor",
    "privalia.com": "Privalia",
    "promofarma.com": "PromoFarma",
    "pt.aliexpress.com": "AliExpress Brasil",
    "pullandbear.com": "Pull&Bear",
    "puma.com": "Puma",
    "qoo10.jp": "Qoo10.jp",
    "qoo10.sg": "Qoo10",
    "questrade.com": "Questrade",
    "quikr.com": "Quikr",
    "rakuten.co.jp": "Rakuten Japón",
    "rakuten.com": "Rakuten Americas",
    "rakuten.com.sg": "Rakuten SG",
    "rakuten.tw": "Rakuten TW",
    "ralphlauren.com": "Polo Ralph Lauren",
    "rbc.com": "RBC",
    "rbcdirectinvesting.com": "RBCDirect Investing",
    "real.de": "Real.de (Kaufland)",
    "realmadrid.com": "Real Madrid Shop",
    "renfe.com": "Renfe",
    "rewe.de": "Rewe",
    "ripley.com.cl": "Ripley.cl",
    "ripley.com.co": "Ripley.com.co",
    "ripley.com.pe": "Ripley",
    "rueducommerce.fr": "Rue du Commerce",
    "sagafalabella.com.pe": "Saga Falabella",
    "sainsburys.co.uk": "Sainsbury’s",
    "sallybeauty.com": "Sally Beauty",
    "samsclub.com.mx": "Sam's Club",
    "samsung.com": "Samsung (España)",
    "santaisabel.cl": "Santa Isabel",
    "saturn.de": "Saturn",
    "scotiabank.com": "Scotia",
    "screwfix.com": "Screwfix",
    "sears.com": "Sears",
    "secoo.com": "Secoo",
    "segundamano.mx": "Segundamano México",
    "sendo.vn": "Sendo",
    "sennheiser.com": "Sennheiser",
    "sephora.com": "Sephora",
    "sephora.es": "Sephora España",
    "shein.com": "Shein LATAM",
    "shop.app": "Shop (Shopify)",
    "shopee.co.id": "Shopee Indonesia",
    "shopee.com": "Shopee",
    "shopee.com.br": "Shopee Brasil",
    "shopee.kr": "Shopee.kr",
    "shopee.ph": "Shopee",
    "shopee.tw": "Shopee Taiwán",
    "shopgoodwill.com": "ShopGoodwill",
    "shopify.com": "Shopify (plataforma)",
    "shoppersdrugmart.ca": "Shoppers Drug Mart",
    "shopping.google.com": "Google Shopping EU",
    "shopping.naver.com": "Naver Shopping",
    "shopping.yahoo.co.jp": "Yahoo Shopping",
    "shoptime.com.br": "Shoptime",
    "showroomprive.es": "Showroomprive",
    "simplii.com": "Simplii",
    "slot.ng": "Slot",
    "smythstoys.com": "Smyths Toys",
    "smzdm.com": "SMZDM",
    "snapdeal.com": "Snapdeal",
    "sodimac.com": "Sodimac",
    "sokowatch.com": "Sokowatch",
    "sololibros.com.ar": "SoloLibros",
    "soriana.com": "Soriana",
    "souq.com": "Souq (legacy)",
    "spanish.alibaba.com": "Alibaba Español",
    "spartoo.com": "Spartoo",
    "sprintersports.com": "Sprinter",
    "square.com": "Square Online",
    "ssense.com": "SSENSE",
    "ssg.com": "SSG.com",
    "staples.ca": "Staples Canadá",
    "staples.com": "Staples",
    "stockx.com": "StockX",
    "store.coupang.com": "Coupang Marketplace",
    "store.google.com": "Google Store",
    "stradivarius.com": "Stradivarius",
    "subito.it": "Subito",
    "submarino.com.br": "Submarino",
    "suburbia.com.mx": "Suburbia",
    "suning.com": "Suning",
    "superbalist.com": "Superbalist",
    "swappa.com": "Swappa",
    "swarovski.com": "Swarovski",
    "swiggyin.com": "Swiggy Instamart",
    "takealot.com": "Takealot",
    "tangerine.ca": "Tangerine",
    "taobao.com": "Taobao",
    "target.com": "Target",
    "td.com": "TD Bank",
    "telefonica.es": "Telefónica",
    "temu.com": "Temu US",
    "tenon.com": "TenOn",
    "termidor.es": "Termidor",
    "tesco.com": "Tesco",
    "thebay.com": "Hudson’s Bay",
    "therealreal.com": "RealReal",
    "thomann.de": "Thomann",
    "ticketmaster.com": "Ticketmaster",
    "tienda365.com.pe": "Tienda365",
    "tiendasparis.cl": "Paris",
    "tiki.vn": "Tiki",
    "tiktok.com": "TikTok Shop ES",
    "tmall.aliexpress.com": "AliExpress Tmall",
    "tmall.com": "Tmall",
    "tmall.hk": "Tmall Global",
    "tokopedia.com": "Tokopedia",
    "tommyhilfiger.com": "Tommy Hilfiger",
    "tottus.com.pe": "Tottus.com.pe",
    "tous.com": "Tous",
    "toysrus.es": "Toys R Us",
    "tradeinn.com": "TradeInn",
    "trendyol.com": "Trendyol",
    "ubereats.com": "Uber Eats",
    "ubuy.co.za": "Ubuy",
    "ulta.com": "Ulta Beauty",
    "unacademy.com": "Unacademy",
    "underarmour.com": "Under Armour",
    "unico.com.ar": "Unico",
    "unieuro.it": "Unieuro",
    "uniqlo.com": "Uniqlo",
    "urbanoutfitters.com": "Urban Outfitters",
    "valentino.com": "Valentino",
    "veepee.com": "Veepee",
    "veepee.es": "Veepee",
    "veepee.fr": "Veepee",
    "versace.com": "Versace",
    "very.co.uk": "Very",
    "vimeo.com": "Vimeo",
    "vinted.co.uk": "Vinted",
    "vinted.com": "Vinted",
    "vinted.es": "Vinted España",
    "vinted.pl": "Vinted",
    "vip.com": "Vipshop",
    "vipshop.com": "Vipshop",
    "vodafone.es": "Vodafone",
    "walgreens.com": "Walgreens",
    "wallapop.com": "Wallapop",
    "walmart.ca": "Walmart Canadá",
    "walmart.com": "Walmart",
    "walmart.com.ar": "Walmart.com.ar",
    "walmart.com.mx": "Walmart México",
    "wayfair.co.uk": "Wayfair",
    "wayfair.com": "Wayfair",
    "wechat.com": "WeChat Stores",
    "wehkamp.nl": "Wehkamp",
    "weidian.com": "WeiDian",
    "weixin.qq.com": "WeChat Mini Shops",
    "wemakeprice.com": "Wemakeprice",
    "wildberries.com": "Wildberries EU",
    "wildberries.kz": "Wildberries KZ",
    "wildberries.ru": "Wildberries",
    "wish.com": "Wish US",
    "wong.com.pe": "Wong.com.pe",
    "woocommerce.com": "WooCommerce",
    "woolworths.co.za": "Woolworths SA",
    "world.taobao.com": "Taobao Global",
    "worten.es": "Worten.es",
    "www2.hm.com": "H&M",
    "x-kom.pl": "x-kom",
    "xiaohongshu.com": "Xiaohongshu",
    "yalladealz.com": "Yalla Dealz",
    "yapo.cl": "Yapo.cl",
    "yihaodian.com.cn": "Yihaodian",
    "yo.com.ar": "YO.com.ar",
    "yodobashi.com": "Yodobashi",
    "yoox.com": "Yoox",
    "youpin.mi.com": "Xiaomi YouPin",
    "zalando.de": "Zalando",
    "zalando.es": "Zalando España",
    "zalando.fr": "Zalando",
    "zalando.it": "Zalando",
    "zalando.nl": "Zalando NL",
    "zalando.pl": "Zalando",
    "zalora.com": "Zalora",
    "zando.co.za": "Zando",
    "zara.com": "Zara",
    "zenmarket.jp": "Zenmarket",
    "zilingo.com": "Zilingo",
    "zoom.com.br": "Zoom BR",
}
