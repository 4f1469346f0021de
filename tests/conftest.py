import copy
import json

import pytest

from recipe_importer.app.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def wrap_in_html():
    def _wrap(*documents) -> str:
        blocks = "".join(
            f'<script type="application/ld+json">{json.dumps(doc, ensure_ascii=False)}</script>'
            for doc in documents
        )
        return f"<html><head>{blocks}</head><body></body></html>"

    return _wrap


ICA_SEMIFREDDO = {
    "@context": "https://schema.org/",
    "@type": "Recipe",
    "name": "Chokladsemifreddo med citronolja och söta krutonger",
    "image": "https://assets.icanet.se/t_ICAseAbsoluteUrl/tiz6lzbzowopex15f6r1.jpg",
    "url": "https://www.ica.se/recept/chokladsemifreddo-med-citronolja-och-sota-krutonger-750732/",
    "description": "En len chokladsemifreddo med citronolja och söta krutonger.",
    "datePublished": "2025-12-12",
    "author": {"@type": "Organization", "name": "ICA Köket"},
    "totalTime": "PT90M",
    "recipeCategory": "Efterrätt",
    "recipeYield": "8",
    "recipeIngredient": [
        "4 dl vispgrädde",
        "3 ägg",
        "1/2 förp dulce de leche (à ca 400 g)(spara resten till servering)",
        "200 g mörk bakchoklad (55%)",
        "1/2 citron (finrivet skal)",
        "1 dl olivolja",
        "2 skivor surdegsbröd",
        "1 msk olja",
        "1 msk strösocker",
        "2 dl vispgrädde",
        "1/2 förp dulce de leche (à ca 400 g)",
        "kakao",
    ],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Vispa grädden löst."},
        {"@type": "HowToStep", "text": "Vispa äggvitorna till ett hårt skum."},
        {"@type": "HowToStep", "text": "Hacka och smält chokladen."},
    ],
}

ICA_TONFISKSALLAD = {
    "@context": "https://schema.org/",
    "@type": "Recipe",
    "name": "Tonfisksallad med kikärtor och dijonnaise",
    "image": "https://assets.icanet.se/t_ICAseAbsoluteUrl/imagevaultfiles/id_251738/cf_259/tonfisksallad.jpg",
    "description": "Krispig sallad med chilistekta kikärtor och dijonnaise.",
    "author": {"@type": "Organization", "name": "ICA Köket"},
    "totalTime": "PT30M",
    "recipeCategory": "Huvudrätt,Middag",
    "recipeYield": "4",
    "recipeIngredient": [
        "1 förp kokta kikärtor (à 380 g)",
        "3 msk olja",
        "1 tsk chilipulver",
        "2 krm salt",
        "1 dl majonnäs",
        "2 msk dijonsenap",
        "1 msk finrivet citronskal",
        "3 msk färskpressad citronjuice",
        "1/2 tsk svartpeppar",
        "1 gurka (à ca 300 g)",
        "2 endive- eller hjärtsallad",
        "2 förp tonfisk i olja (à ca 170 g)",
        "1/2 dl finskuren gräslök",
    ],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Häll kikärtorna i ett durkslag."},
        {"@type": "HowToStep", "text": "Rör ihop majonnäs, senap och citron."},
    ],
}

KOKET_KOTTBULLAR = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Köttbullar",
    "image": "https://img.koket.se/standard-mega/kottbullar.jpg",
    "description": "Klassiska köttbullar till julbordet.",
    "author": {"@type": "Person", "name": "Köket.se"},
    "totalTime": "",
    "recipeYield": "4 portioner",
    "recipeIngredient": [
        "250 g fläskfärs",
        "250 g nötfärs",
        "1 gul lök",
        "1 ägg",
        "1 dl kaffegrädde",
        "1 tsk salt",
        "0,5 tsk vitpeppar",
        "1 krm malen kryddpeppar",
        "1 krm malen ingefära",
        "smör, till stekning",
    ],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Skala den gula löken och hacka halva löken fint."},
        {"@type": "HowToStep", "text": "Rulla lagom stora bullar med vattensköljda händer."},
    ],
    "recipeCategory": ["Brunch"],
    "recipeCuisine": [],
    "keywords": ["Färs", "Köttbullar"],
}

KOKET_SJOMANSBIFF = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Videgårds sjömansbiff",
    "image": "https://img.koket.se/standard-mega/videgards-sjomansbiff.png.jpg",
    "description": "Det blir inte mer klassiskt än sjömansbiff!",
    "author": {"@type": "Person", "name": "Erik Videgård"},
    "totalTime": "PT1H",
    "recipeYield": "4 portioner",
    "recipeIngredient": [
        "2 gula lökar, tunt skivade, 3 mm",
        "rapsolja (till stekning)",
        "0,5 dl majsstärkelse (eller vetemjöl)",
        "1 msk salt",
        "1 tsk nymalen svartpeppar",
        "800 g nötinnanlår, tunt skuret i 5 cm bitar",
        "8 potatisar, tunt skivade, 3 mm",
        "2 lagerblad",
        "2 dl oxbuljong",
        "33 cl öl",
        "2 kvistar färsk timjan",
        "persilja, hackad",
        "grönsaker, picklade",
        "senap",
    ],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Sätt ugnen på 200 grader."},
        {"@type": "HowToStep", "text": "Hetta upp en stekgryta."},
    ],
    "recipeCategory": ["Huvudrätt"],
    "recipeCuisine": [],
}

ARLA_PANNKAKOR = {
    "@context": "https://schema.org/",
    "type": "Recipe",
    "@type": "Recipe",
    "name": "Pannkakor",
    "image": "https://images.arla.com/recordid/CAF6A3FD-D0CB-4979-B54A4866FC4EBDD3/pannkaka.jpg?width=1300",
    "author": {"type": "Person", "name": "Arla Mat", "@type": "Person"},
    "description": "Frasiga nystekta pannkakor!",
    "totalTime": "PT30M",
    "cookTime": "PT00M",
    "prepTime": "PT15M",
    "recipeYield": "4 port",
    "recipeCategory": "Huvudrätt, Middag",
    "recipeCuisine": None,
    "recipeIngredient": [
        "3 dl vetemjöl",
        "6 dl Arla Ko® Standardmjölk",
        "3 ägg",
        "½ tsk salt",
        "3 msk Arla Köket® Smör- & rapsolja, till stekning",
    ],
    "recipeInstructions": [
        {
            "type": "HowToSection",
            "@type": "HowToSection",
            "name": "Första instruktionen",
            "itemListElement": [
                {
                    "type": "HowToStep",
                    "@type": "HowToStep",
                    "text": "Vispa ut mjölet i hälften av mjölken.",
                    "url": "https://www.arla.se/recept/pannkaka/#step1-1",
                },
                {
                    "type": "HowToStep",
                    "@type": "HowToStep",
                    "text": "Låt pannkakssmeten svälla ca 10 min.",
                    "url": "https://www.arla.se/recept/pannkaka/#step1-2",
                },
                {
                    "type": "HowToStep",
                    "@type": "HowToStep",
                    "text": "Hetta upp smör- & rapsolja i en stekpanna.",
                    "url": "https://www.arla.se/recept/pannkaka/#step1-3",
                },
            ],
        },
    ],
    "video": None,
}

ARLA_LAMMSTEK = {
    "@context": "https://schema.org/",
    "type": "Recipe",
    "@type": "Recipe",
    "name": "Lammstek med varmt örtsmör",
    "image": "https://images.arla.com/recordid/8CA6F71C/lammstek-med-varmt-ortsmor.jpg?width=1300",
    "author": {"type": "Person", "name": "Arla Mat", "@type": "Person"},
    "description": "Saftig lammstek med varmt örtsmör.",
    "totalTime": "PT1H30M",
    "cookTime": "PT00M",
    "prepTime": "PT00M",
    "recipeYield": "8 port",
    "recipeCategory": "Varmrätt",
    "recipeCuisine": None,
    "recipeIngredient": [
        "2 kg lammstek med ben",
        "eller 1,3 kg benfri lammstek",
        "2 msk Svenskt Smör från Arla®",
        "2 hackade vitlöksklyftor",
        "1 msk hackad färsk rosmarin",
        "rivet skal av 1 citron",
        "2 tsk salt",
        "2 krm svartpeppar",
        "100 g Svenskt Smör från Arla®",
        "1 stor hackad vitlöksklyfta",
        "1 msk hackad färsk rosmarin",
        "1 dl hackad bladpersilja",
        "rivet skal av 1 citron",
        "2 msk hackad kapris",
        "2 hackade sardellfiléer",
    ],
    "recipeInstructions": [
        {
            "type": "HowToSection",
            "@type": "HowToSection",
            "name": "Första instruktionen",
            "itemListElement": [
                {"type": "HowToStep", "@type": "HowToStep", "text": "Sätt ugnen på 250°."},
                {"type": "HowToStep", "@type": "HowToStep", "text": "Smält smöret och blanda."},
                {"type": "HowToStep", "@type": "HowToStep", "text": "Bred blandningen runtom steken."},
            ],
        },
        {
            "type": "HowToSection",
            "@type": "HowToSection",
            "name": "Sista instruktionen",
            "itemListElement": [
                {"type": "HowToStep", "@type": "HowToStep", "text": "Smält smöret i en kastrull."},
                {"type": "HowToStep", "@type": "HowToStep", "text": "Skär lammsteken i skivor och servera."},
            ],
        },
    ],
    "video": None,
}

TASTELINE_KOTTBULLAR = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Klassiska köttbullar med potatismos, lingon och inlagd gurka",
    "image": "https://eu-central-1.linodeobjects.com/tasteline/2020/09/kottbullar.jpg",
    "datePublished": "2020-09-25",
    "totalTime": "PT45M",
    "recipeYield": "4 portioner",
    "description": "Underbar husmanskost.",
    "recipeCategory": "Mat",
    "recipeIngredient": [
        "gul lök(ar)",
        "mjölig potatis",
        "gurkor",
        "rårörda lingon",
        "mat & bak smör",
        "salt",
        "vatten",
        "ströbröd",
        "mjölk",
        "ättiksprit, 12 %",
        "strösocker",
        "ägg",
        "blandfärs",
        "olivolja",
    ],
    "recipeInstructions": [
        "Skiva gurkan tunt och lägg den i en skål.",
        "Skala potatisen och koka den mjuk.",
        "Skala och finhacka lök.",
    ],
    "author": {"type": "Person", "name": "Mari Bergman"},
}

RECEPTSE_CHOKLADBOLL = {
    "@context": "http://schema.org",
    "@type": "Recipe",
    "author": {"@type": "Person", "name": "Boel Ottmer"},
    "name": "Chokladbollstårta med chokladtäcke",
    "totalTime": "PT25M",
    "recipeIngredient": [
        "225 g mjukt smör",
        "2 dl strösocker",
        "50 g hasselnötter",
        "7 dl havregryn",
        "1 dl kakao",
        "2 tsk vaniljsocker",
        "1 krm salt",
        "¾ dl starkt kaffe svalt",
        "¾ dl vispgrädde",
        "150 g mörk eller ljus choklad, hackad",
        "2 dl riven kokos",
        "1,5 dl vispgrädde",
    ],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Mixa alla ingredienser."},
        {"@type": "HowToStep", "text": "Ställ undan ca 1 dl av smeten."},
    ],
    "recipeYield": 10,
    "image": "https://images.recept.se/images/recipes/chokladbollstarta_38289.jpg",
    "recipeCuisine": "Sverige",
    "recipeCategory": "Bak & dessert",
    "description": "Chokladbollstårta – enkelt och supergott.",
    "suitableForDiet": "http://schema.org/VegetarianDiet",
}


def _fixture(data):
    @pytest.fixture
    def _recipe():
        return copy.deepcopy(data)

    return _recipe


ica_semifreddo = _fixture(ICA_SEMIFREDDO)
ica_tonfisksallad = _fixture(ICA_TONFISKSALLAD)
koket_kottbullar = _fixture(KOKET_KOTTBULLAR)
koket_sjomansbiff = _fixture(KOKET_SJOMANSBIFF)
arla_pannkakor = _fixture(ARLA_PANNKAKOR)
arla_lammstek = _fixture(ARLA_LAMMSTEK)
tasteline_kottbullar = _fixture(TASTELINE_KOTTBULLAR)
receptse_chokladboll = _fixture(RECEPTSE_CHOKLADBOLL)
