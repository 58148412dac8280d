"""
Phrase catalogs for will documents and execution instructions.

One catalog per document language. Keys with an "@style" suffix are
variants for a language style and fall back to the plain key.
Placeholders use str.format named fields.
"""

from typing import Dict


EN: Dict[str, str] = {
    'title': 'LAST WILL AND TESTAMENT',
    'form.holographic': 'Holographic will: to be written out entirely in the testator\'s own hand',
    'form.allographic': 'Allographic will: signed by the testator before witnesses',
    'form.witnessed': 'Will made before witnesses',
    'form.notarial': 'Notarial will: to be executed as a notarial deed',
    'conjunction': 'and',

    'identity.born': 'born on {dob}',
    'identity.birthplace': 'in {place}',
    'identity.personal_id': 'personal identification number {personal_id}',
    'identity.citizenship': 'citizen of {citizenship}',
    'identity.profession': 'by profession {profession}',
    'identity.residing': 'residing at {address}',
    'intro': 'I, {name}, {identity}, declare this document to be my last will and testament.',
    'intro@simplified': 'My name is {name}, {identity}. This is my will.',
    'intro@traditional': 'I, {name}, {identity}, being of sound mind and memory, do hereby make, '
                         'publish and declare this to be my last will and testament.',
    'placeholder.name': '[full name]',
    'placeholder.date': '[date of birth]',
    'placeholder.address': '[address]',

    'section.declarations': 'Declarations',
    'section.beneficiaries': 'Beneficiaries',
    'section.asset_distribution': 'Distribution of Assets',
    'section.executors': 'Executors',
    'section.guardianship': 'Guardianship of Minor Children',
    'section.special_instructions': 'Special Instructions',
    'section.execution': 'Execution',

    'clause.revocation': 'I revoke all wills and codicils previously made by me.',
    'clause.revocation@simplified': 'This will replaces all my earlier wills.',
    'clause.revocation@traditional': 'I hereby revoke all former wills, codicils and testamentary '
                                     'dispositions heretofore made by me.',
    'clause.capacity': 'I make this will freely, with full legal capacity and without pressure from any person.',
    'clause.capacity@simplified': 'I make this will of my own free will and nobody is pressuring me.',
    'clause.governing_law': 'This will is governed by the law of {country}.',
    'clause.forced_heirship': 'I am aware that under the law of {country} my descendants and other protected '
                              'heirs may be entitled to a compulsory share which this will cannot remove.',
    'clause.residuary.named': 'Everything I own at my death that is not otherwise disposed of in this will '
                              '(my residuary estate) passes to {names}.',
    'clause.residuary.statutory': 'Any part of my estate not disposed of in this will passes according to '
                                  'the statutory rules of succession.',
    'clause.survivorship': 'A beneficiary who does not survive me is treated as having died before me; their '
                           'gift passes to their alternate beneficiary where one is named.',
    'clause.executor_powers': 'My executors may take possession of, manage, sell and distribute my property '
                              'and do everything necessary to administer my estate.',
    'clause.tax': 'Inheritance tax payable on any gift under this will is borne by the residuary estate.',
    'clause.digital_assets': 'My executors may access, manage, transfer or close my digital accounts and '
                             'digital assets.',

    'beneficiaries.intro': 'I leave my estate as follows:',
    'beneficiary.percentage': '{name} ({relationship}) receives {share} of my residuary estate.',
    'beneficiary.percentage_assets': '{name} ({relationship}) receives {share} of {assets}.',
    'beneficiary.amount': '{name} ({relationship}) receives the sum of {amount}.',
    'beneficiary.assets': '{name} ({relationship}) receives {assets}.',
    'beneficiary.remainder': '{name} ({relationship}) receives the residue of my estate.',
    'beneficiary.remainder_shared': '{name} ({relationship}) receives the residue of my estate in equal shares '
                                    'with the other residuary beneficiaries.',
    'beneficiary.undefined': '{name} ({relationship}) is named as a beneficiary.',
    'beneficiary.born': 'born on {dob}',
    'beneficiary.conditions': 'This gift is subject to: {conditions}.',
    'beneficiary.alternate': 'If {name} does not survive me, this gift passes to {alternate}.',
    'relationship.spouse': 'my spouse',
    'relationship.child': 'my child',
    'relationship.parent': 'my parent',
    'relationship.sibling': 'my sibling',
    'relationship.grandchild': 'my grandchild',
    'relationship.friend': 'my friend',
    'relationship.charity': 'charitable organisation',
    'relationship.other': 'beneficiary',

    'assets.intro': 'My estate includes the following assets:',
    'assets.none': 'I declare that I hold no significant assets at the time of making this will.',
    'asset.value': 'estimated value {value}',
    'asset.location': 'located at {location}',
    'asset.ownership': 'my {percentage} ownership interest',
    'asset.encumbrance': 'subject to {encumbrances}',
    'asset.to': '{asset} passes to {recipients}.',
    'asset.residuary': '{asset} forms part of my residuary estate.',
    'asset.recipient_share': '{name} ({share})',
    'asset_type.real_estate': 'Real estate',
    'asset_type.bank_account': 'Bank account',
    'asset_type.investment': 'Investment',
    'asset_type.vehicle': 'Vehicle',
    'asset_type.business': 'Business interest',
    'asset_type.personal_property': 'Personal property',
    'asset_type.digital_asset': 'Digital asset',
    'asset_type.other': 'Other asset',

    'executor.primary': 'I appoint {name} as executor of this will.',
    'executor.alternate': 'If {primary} is unable or unwilling to act, I appoint {name} '
                          'as alternate executor.',
    'executor.co_executor': 'I appoint {name} to act jointly as co-executor.',
    'executor.unnamed': 'my executor',
    'executor.compensation': '{name} acts in a professional capacity and is entitled to remuneration: {compensation}.',
    'executor.powers': 'Powers granted to {name}: {powers}.',
    'executor.restrictions': 'Restrictions on {name}: {restrictions}.',

    'guardian.appoint': 'I appoint {guardian} as guardian of my child {child}.',
    'guardian.alternate': 'If {guardian} cannot act, I appoint {alternate} as guardian.',
    'guardian.instructions': 'Instructions to the guardian: {text}',
    'guardian.financial': 'Financial provision for {child}: {text}',
    'guardian.education': 'My wishes for the education of {child}: {text}',
    'guardian.child_unnamed': '[child]',

    'instruction.recipient': 'For the attention of {recipient}.',
    'instruction_category.funeral': 'Funeral',
    'instruction_category.burial': 'Burial',
    'instruction_category.organ_donation': 'Organ donation',
    'instruction_category.pet_care': 'Care of pets',
    'instruction_category.digital_assets': 'Digital assets',
    'instruction_category.business_succession': 'Business succession',
    'instruction_category.charitable_giving': 'Charitable giving',
    'instruction_category.personal_message': 'Personal message',
    'instruction_category.other': 'Other wishes',

    'footer.place_date': 'Place: ____________________    Date: ____________________',
    'footer.signature': 'Signature of the testator',
    'footer.holographic': 'This will must be written out entirely in the testator\'s own handwriting, '
                          'dated and signed. A typed or printed copy is not valid.',
    'footer.witnessed': 'Signed by the testator in the simultaneous presence of the witnesses below, who sign '
                        'in the presence of the testator and of each other.',
    'footer.notarial': 'This draft is to be executed as a notarial deed before a notary.',
    'footer.witness': 'Witness {number}: name, address, signature',

    'explain.declarations': 'These clauses confirm your identity, cancel earlier wills and state which law applies.',
    'explain.beneficiaries': 'This part says who inherits and how much each person receives.',
    'explain.asset_distribution': 'This part lists your assets and who receives each of them. Assets not '
                                  'given to anyone specifically fall into the residuary estate.',
    'explain.executors': 'The executor collects your assets, pays debts and distributes the estate.',
    'explain.guardianship': 'A court will usually follow your choice of guardian when deciding who cares '
                            'for your minor children.',
    'explain.special_instructions': 'These wishes guide your executors and family; some may not be legally binding.',
    'explain.legal_basis': 'Legal basis: {reference}',

    'disclaimer': 'This document was generated from the information you provided and does not constitute legal '
                  'advice. Have it reviewed by a lawyer or notary before signing.',

    'exec.holographic.1': 'Copy the complete text of the will by hand on paper.',
    'exec.holographic.2': 'Write the place and the full date (day, month, year) in your own hand.',
    'exec.holographic.3': 'Sign the will by hand at the end of the text.',
    'exec.holographic.4': 'Store the original safely and tell your executor where it is kept.',
    'exec.witnessed.1': 'Print the will.',
    'exec.witnessed.2': 'Meet with all witnesses at the same time.',
    'exec.witnessed.3': 'Sign the will in front of the witnesses and confirm that it contains your last will.',
    'exec.witnessed.4': 'Have each witness sign, adding their name, address and a note that they sign as a witness.',
    'exec.witnessed.5': 'Store the original safely and tell your executor where it is kept.',
    'exec.notarial.1': 'Find a notary through {organization} ({url}).',
    'exec.notarial.contact': 'Contact a notary in {country}.',
    'exec.notarial.2': 'Book an appointment and bring this draft and a valid identity document.',
    'exec.notarial.3': 'The notary records your will as a notarial deed; read it and sign it before the notary.',
    'exec.notarial.4': 'Ask for the will to be entered in the central register of wills.',

    'req.handwritten': 'The entire will must be written by the testator\'s own hand.',
    'req.signed': 'The will must be signed by the testator.',
    'req.dated': 'The will must state the date on which it was made (day, month, year).',
    'req.personal_handwriting_required': 'Typed, printed or dictated text is not valid for a holographic will.',
    'req.minors_notarial_only': 'A testator under the age of majority may only make a notarial will.',
    'req.identity': 'The testator must prove their identity with a valid identity document.',
    'witness.count': 'At least {count} witnesses are required.',
    'witness.not_beneficiary': 'Witnesses must not be beneficiaries under the will.',
    'witness.adult': 'Witnesses must be adults.',
    'witness.mentally_capable': 'Witnesses must have full legal capacity.',
    'witness.simultaneous_presence': 'All witnesses must be present at the same time.',
    'warn.holographic': 'A printed or typed copy signed by you is not a valid holographic will.',
    'warn.witnessed': 'A beneficiary who acts as a witness may put the gift or the whole will at risk.',
    'warn.notarial': 'Notary fees are set by tariff and depend on the value of the estate.',
    'warn.notarization_required': 'This jurisdiction requires wills to be made before a notary.',
    'warn.review': 'Review your will after major life events such as marriage, divorce or the birth of a child.',
    'notary.costs': 'Estimated notary fees: {min} to {max}.',
}


CS: Dict[str, str] = {
    'title': 'ZÁVĚŤ',
    'form.holographic': 'Vlastnoruční závěť: celý text musí zůstavitel napsat vlastní rukou',
    'form.allographic': 'Závěť podepsaná zůstavitelem před svědky',
    'form.witnessed': 'Závěť pořízená před svědky',
    'form.notarial': 'Závěť ve formě notářského zápisu',
    'conjunction': 'a',

    'identity.born': 'narozen(a) {dob}',
    'identity.birthplace': 'v {place}',
    'identity.personal_id': 'rodné číslo {personal_id}',
    'identity.citizenship': 'státní občan {citizenship}',
    'identity.profession': 'povoláním {profession}',
    'identity.residing': 'bytem {address}',
    'intro': 'Já, {name}, {identity}, prohlašuji, že tato listina obsahuje mou poslední vůli.',
    'intro@simplified': 'Jmenuji se {name}, {identity}. Toto je moje závěť.',
    'placeholder.name': '[jméno a příjmení]',
    'placeholder.date': '[datum narození]',
    'placeholder.address': '[adresa]',

    'section.declarations': 'Prohlášení',
    'section.beneficiaries': 'Dědicové',
    'section.asset_distribution': 'Rozdělení majetku',
    'section.executors': 'Vykonavatel závěti',
    'section.guardianship': 'Poručenství nad nezletilými dětmi',
    'section.special_instructions': 'Zvláštní pokyny',
    'section.execution': 'Podpis',

    'clause.revocation': 'Ruším všechny své dříve pořízené závěti a jiná pořízení pro případ smrti.',
    'clause.revocation@simplified': 'Tato závěť nahrazuje všechny moje dřívější závěti.',
    'clause.capacity': 'Tuto závěť pořizuji svobodně, vážně, při plné svéprávnosti a bez nátlaku jakékoli osoby.',
    'clause.governing_law': 'Tato závěť se řídí právem státu {country}.',
    'clause.forced_heirship': 'Jsem si vědom(a), že podle práva státu {country} mají mí potomci jako nepominutelní '
                              'dědicové nárok na povinný díl, který jim tato závěť nemůže odejmout.',
    'clause.residuary.named': 'Veškerý majetek, o kterém v této závěti jinak nepořizuji (zůstatek pozůstalosti), '
                              'připadne {names}.',
    'clause.residuary.statutory': 'O části pozůstalosti, o které v této závěti nepořizuji, se dědí podle zákona.',
    'clause.survivorship': 'Nepřežije-li mě některý dědic, připadne jeho podíl náhradníkovi, je-li určen.',
    'clause.executor_powers': 'Vykonavatel závěti je oprávněn spravovat, zpeněžit a rozdělit můj majetek a činit vše, '
                              'co je ke správě pozůstalosti potřeba.',
    'clause.tax': 'Případnou daň z nabytí pozůstalosti nese zůstatek pozůstalosti.',
    'clause.digital_assets': 'Vykonavatel závěti je oprávněn přistupovat k mým digitálním účtům a aktivům, '
                             'spravovat je, převést je nebo je zrušit.',

    'beneficiaries.intro': 'Svůj majetek odkazuji takto:',
    'beneficiary.percentage': '{name} ({relationship}) obdrží {share} zůstatku pozůstalosti.',
    'beneficiary.percentage_assets': '{name} ({relationship}) obdrží {share} z {assets}.',
    'beneficiary.amount': '{name} ({relationship}) obdrží částku {amount}.',
    'beneficiary.assets': '{name} ({relationship}) obdrží {assets}.',
    'beneficiary.remainder': '{name} ({relationship}) obdrží zůstatek pozůstalosti.',
    'beneficiary.remainder_shared': '{name} ({relationship}) obdrží zůstatek pozůstalosti rovným dílem '
                                    's ostatními dědici zůstatku.',
    'beneficiary.undefined': '{name} ({relationship}) je povolán(a) jako dědic.',
    'beneficiary.born': 'narozen(a) {dob}',
    'beneficiary.conditions': 'Toto pořízení je vázáno na: {conditions}.',
    'beneficiary.alternate': 'Nepřežije-li mě {name}, připadne tento podíl {alternate}.',
    'relationship.spouse': 'manžel/manželka',
    'relationship.child': 'dítě',
    'relationship.parent': 'rodič',
    'relationship.sibling': 'sourozenec',
    'relationship.grandchild': 'vnuk/vnučka',
    'relationship.friend': 'přítel/přítelkyně',
    'relationship.charity': 'dobročinná organizace',
    'relationship.other': 'dědic',

    'assets.intro': 'Můj majetek zahrnuje:',
    'assets.none': 'Prohlašuji, že v době pořízení této závěti nevlastním významný majetek.',
    'asset.value': 'odhadovaná hodnota {value}',
    'asset.location': 'umístění {location}',
    'asset.ownership': 'můj podíl {percentage}',
    'asset.encumbrance': 'zatíženo: {encumbrances}',
    'asset.to': '{asset} připadne {recipients}.',
    'asset.residuary': '{asset} je součástí zůstatku pozůstalosti.',
    'asset.recipient_share': '{name} ({share})',
    'asset_type.real_estate': 'Nemovitost',
    'asset_type.bank_account': 'Bankovní účet',
    'asset_type.investment': 'Investice',
    'asset_type.vehicle': 'Vozidlo',
    'asset_type.business': 'Podíl v obchodní společnosti',
    'asset_type.personal_property': 'Movitá věc',
    'asset_type.digital_asset': 'Digitální aktivum',
    'asset_type.other': 'Jiný majetek',

    'executor.primary': 'Vykonavatelem této závěti povolávám {name}.',
    'executor.alternate': 'Nemůže-li nebo nechce-li {primary} funkci vykonávat, povolávám {name} '
                          'jako náhradního vykonavatele.',
    'executor.co_executor': 'Společně s ním povolávám {name} jako dalšího vykonavatele.',
    'executor.unnamed': 'vykonavatel závěti',
    'executor.compensation': '{name} vykonává funkci profesionálně a náleží mu odměna: {compensation}.',
    'executor.powers': 'Oprávnění vykonavatele {name}: {powers}.',
    'executor.restrictions': 'Omezení vykonavatele {name}: {restrictions}.',

    'guardian.appoint': 'Poručníkem mého dítěte {child} určuji {guardian}.',
    'guardian.alternate': 'Nemůže-li {guardian} funkci vykonávat, určuji poručníkem {alternate}.',
    'guardian.instructions': 'Pokyny pro poručníka: {text}',
    'guardian.financial': 'Finanční zabezpečení dítěte {child}: {text}',
    'guardian.education': 'Má přání ohledně vzdělání dítěte {child}: {text}',
    'guardian.child_unnamed': '[dítě]',

    'instruction.recipient': 'Určeno pro: {recipient}.',
    'instruction_category.funeral': 'Pohřeb',
    'instruction_category.burial': 'Uložení ostatků',
    'instruction_category.organ_donation': 'Dárcovství orgánů',
    'instruction_category.pet_care': 'Péče o zvířata',
    'instruction_category.digital_assets': 'Digitální majetek',
    'instruction_category.business_succession': 'Nástupnictví v podnikání',
    'instruction_category.charitable_giving': 'Dobročinné dary',
    'instruction_category.personal_message': 'Osobní vzkaz',
    'instruction_category.other': 'Další přání',

    'footer.place_date': 'V ____________________ dne ____________________',
    'footer.signature': 'Podpis zůstavitele',
    'footer.holographic': 'Tuto závěť musí zůstavitel celou napsat vlastní rukou, opatřit datem a podepsat. '
                          'Tištěná kopie není platná.',
    'footer.witnessed': 'Zůstavitel závěť podepsal za současné přítomnosti níže uvedených svědků, kteří ji '
                        'podepsali v přítomnosti zůstavitele a sebe navzájem.',
    'footer.notarial': 'Tento návrh bude pořízen formou notářského zápisu před notářem.',
    'footer.witness': 'Svědek {number}: jméno, adresa, podpis',

    'explain.declarations': 'Tato ustanovení určují vaši totožnost, ruší dřívější závěti a určují rozhodné právo.',
    'explain.beneficiaries': 'Tato část určuje, kdo dědí a jaký podíl každý obdrží.',
    'explain.asset_distribution': 'Tato část uvádí váš majetek a kdo jej obdrží. Majetek, který není nikomu '
                                  'výslovně určen, je součástí zůstatku pozůstalosti.',
    'explain.executors': 'Vykonavatel závěti dbá na splnění vaší poslední vůle a spravuje pozůstalost.',
    'explain.guardianship': 'Soud vaše přání ohledně poručníka zpravidla respektuje.',
    'explain.special_instructions': 'Tato přání slouží jako vodítko pro rodinu a vykonavatele; nemusí být právně závazná.',
    'explain.legal_basis': 'Právní základ: {reference}',

    'disclaimer': 'Tento dokument byl vytvořen z vámi zadaných údajů a nepředstavuje právní poradenství. '
                  'Před podpisem jej nechte zkontrolovat advokátem nebo notářem.',

    'exec.holographic.1': 'Opište celý text závěti vlastní rukou na papír.',
    'exec.holographic.2': 'Vlastní rukou uveďte místo a celé datum (den, měsíc, rok).',
    'exec.holographic.3': 'Závěť na konci textu vlastnoručně podepište.',
    'exec.holographic.4': 'Originál bezpečně uložte a sdělte vykonavateli, kde se nachází.',
    'exec.witnessed.1': 'Vytiskněte závěť.',
    'exec.witnessed.2': 'Sejděte se se všemi svědky současně.',
    'exec.witnessed.3': 'Před svědky závěť podepište a potvrďte, že obsahuje vaši poslední vůli.',
    'exec.witnessed.4': 'Každý svědek připojí podpis, jméno, adresu a doložku, že podepisuje jako svědek.',
    'exec.witnessed.5': 'Originál bezpečně uložte a sdělte vykonavateli, kde se nachází.',
    'exec.notarial.1': 'Vyhledejte notáře prostřednictvím {organization} ({url}).',
    'exec.notarial.contact': 'Obraťte se na notáře ve státě {country}.',
    'exec.notarial.2': 'Objednejte se a přineste tento návrh a platný doklad totožnosti.',
    'exec.notarial.3': 'Notář sepíše závěť formou notářského zápisu; přečtěte si jej a před notářem podepište.',
    'exec.notarial.4': 'Požádejte o zápis závěti do Evidence právních jednání pro případ smrti.',

    'req.handwritten': 'Celou závěť musí zůstavitel napsat vlastní rukou.',
    'req.signed': 'Závěť musí zůstavitel podepsat.',
    'req.dated': 'Závěť musí obsahovat datum pořízení (den, měsíc, rok).',
    'req.personal_handwriting_required': 'Psaný na stroji, tištěný či nadiktovaný text není vlastnoruční závětí.',
    'req.minors_notarial_only': 'Nezletilý zůstavitel může pořídit závěť jen formou notářského zápisu.',
    'req.identity': 'Zůstavitel musí prokázat totožnost platným dokladem.',
    'witness.count': 'Jsou potřeba alespoň {count} svědci.',
    'witness.not_beneficiary': 'Svědkem nesmí být dědic ani osoba jemu blízká.',
    'witness.adult': 'Svědci musí být zletilí.',
    'witness.mentally_capable': 'Svědci musí být plně svéprávní.',
    'witness.simultaneous_presence': 'Všichni svědci musí být přítomni současně.',
    'warn.holographic': 'Tištěná či psaná na stroji kopie s vaším podpisem není platnou vlastnoruční závětí.',
    'warn.witnessed': 'Pokud je svědkem dědic, může být ohroženo jeho dědictví nebo celá závěť.',
    'warn.notarial': 'Odměna notáře je dána tarifem a závisí na hodnotě majetku.',
    'warn.notarization_required': 'V této jurisdikci musí být závěť pořízena před notářem.',
    'warn.review': 'Po významných životních událostech, jako je sňatek, rozvod nebo narození dítěte, závěť zkontrolujte.',
    'notary.costs': 'Odhadovaná odměna notáře: {min} až {max}.',
}


SK: Dict[str, str] = {
    'title': 'ZÁVET',
    'form.holographic': 'Vlastnoručný závet: celý text musí poručiteľ napísať vlastnou rukou',
    'form.allographic': 'Závet podpísaný poručiteľom pred svedkami',
    'form.witnessed': 'Závet spísaný pred svedkami',
    'form.notarial': 'Závet vo forme notárskej zápisnice',
    'conjunction': 'a',

    'identity.born': 'narodený(á) {dob}',
    'identity.birthplace': 'v {place}',
    'identity.personal_id': 'rodné číslo {personal_id}',
    'identity.citizenship': 'štátny občan {citizenship}',
    'identity.profession': 'povolaním {profession}',
    'identity.residing': 'bytom {address}',
    'intro': 'Ja, {name}, {identity}, vyhlasujem, že táto listina obsahuje moju poslednú vôľu.',
    'intro@simplified': 'Volám sa {name}, {identity}. Toto je môj závet.',
    'placeholder.name': '[meno a priezvisko]',
    'placeholder.date': '[dátum narodenia]',
    'placeholder.address': '[adresa]',

    'section.declarations': 'Vyhlásenia',
    'section.beneficiaries': 'Dedičia',
    'section.asset_distribution': 'Rozdelenie majetku',
    'section.executors': 'Správca dedičstva',
    'section.guardianship': 'Poručníctvo nad maloletými deťmi',
    'section.special_instructions': 'Osobitné pokyny',
    'section.execution': 'Podpis',

    'clause.revocation': 'Odvolávam všetky svoje skôr urobené závety.',
    'clause.revocation@simplified': 'Tento závet nahrádza všetky moje skoršie závety.',
    'clause.capacity': 'Tento závet robím slobodne, vážne, pri plnej spôsobilosti na právne úkony a bez nátlaku.',
    'clause.governing_law': 'Tento závet sa spravuje právom štátu {country}.',
    'clause.forced_heirship': 'Som si vedomý(á), že podľa práva štátu {country} majú moji potomkovia ako '
                              'neopomenuteľní dedičia nárok na zákonný podiel, ktorý im tento závet nemôže odňať.',
    'clause.residuary.named': 'Všetok majetok, o ktorom v tomto závete inak nerozhodujem (zvyšok dedičstva), '
                              'pripadne {names}.',
    'clause.residuary.statutory': 'O časti dedičstva, o ktorej v tomto závete nerozhodujem, sa dedí podľa zákona.',
    'clause.survivorship': 'Ak ma niektorý dedič neprežije, jeho podiel pripadne náhradníkovi, ak je určený.',
    'clause.executor_powers': 'Správca dedičstva je oprávnený spravovať, speňažiť a rozdeliť môj majetok a robiť '
                              'všetko, čo je na správu dedičstva potrebné.',
    'clause.tax': 'Prípadnú daň z dedičstva znáša zvyšok dedičstva.',
    'clause.digital_assets': 'Správca dedičstva je oprávnený pristupovať k mojim digitálnym účtom a aktívam, '
                             'spravovať ich, previesť ich alebo ich zrušiť.',

    'beneficiaries.intro': 'Svoj majetok odkazujem takto:',
    'beneficiary.percentage': '{name} ({relationship}) dostane {share} zvyšku dedičstva.',
    'beneficiary.percentage_assets': '{name} ({relationship}) dostane {share} z {assets}.',
    'beneficiary.amount': '{name} ({relationship}) dostane sumu {amount}.',
    'beneficiary.assets': '{name} ({relationship}) dostane {assets}.',
    'beneficiary.remainder': '{name} ({relationship}) dostane zvyšok dedičstva.',
    'beneficiary.remainder_shared': '{name} ({relationship}) dostane zvyšok dedičstva rovným dielom '
                                    's ostatnými dedičmi zvyšku.',
    'beneficiary.undefined': '{name} ({relationship}) je ustanovený(á) za dediča.',
    'beneficiary.born': 'narodený(á) {dob}',
    'beneficiary.conditions': 'Toto ustanovenie je viazané na: {conditions}.',
    'beneficiary.alternate': 'Ak ma {name} neprežije, tento podiel pripadne {alternate}.',
    'relationship.spouse': 'manžel/manželka',
    'relationship.child': 'dieťa',
    'relationship.parent': 'rodič',
    'relationship.sibling': 'súrodenec',
    'relationship.grandchild': 'vnuk/vnučka',
    'relationship.friend': 'priateľ/priateľka',
    'relationship.charity': 'dobročinná organizácia',
    'relationship.other': 'dedič',

    'assets.intro': 'Môj majetok zahŕňa:',
    'assets.none': 'Vyhlasujem, že v čase spísania tohto závetu nevlastním významný majetok.',
    'asset.value': 'odhadovaná hodnota {value}',
    'asset.location': 'umiestnenie {location}',
    'asset.ownership': 'môj podiel {percentage}',
    'asset.encumbrance': 'zaťažené: {encumbrances}',
    'asset.to': '{asset} pripadne {recipients}.',
    'asset.residuary': '{asset} je súčasťou zvyšku dedičstva.',
    'asset.recipient_share': '{name} ({share})',
    'asset_type.real_estate': 'Nehnuteľnosť',
    'asset_type.bank_account': 'Bankový účet',
    'asset_type.investment': 'Investícia',
    'asset_type.vehicle': 'Vozidlo',
    'asset_type.business': 'Podiel v obchodnej spoločnosti',
    'asset_type.personal_property': 'Hnuteľná vec',
    'asset_type.digital_asset': 'Digitálne aktívum',
    'asset_type.other': 'Iný majetok',

    'executor.primary': 'Za správcu dedičstva určujem {name}.',
    'executor.alternate': 'Ak {primary} nemôže alebo nechce funkciu vykonávať, určujem {name} '
                          'za náhradného správcu.',
    'executor.co_executor': 'Spoločne s ním určujem {name} za ďalšieho správcu.',
    'executor.unnamed': 'správca dedičstva',
    'executor.compensation': '{name} vykonáva funkciu profesionálne a patrí mu odmena: {compensation}.',
    'executor.powers': 'Oprávnenia správcu {name}: {powers}.',
    'executor.restrictions': 'Obmedzenia správcu {name}: {restrictions}.',

    'guardian.appoint': 'Za poručníka môjho dieťaťa {child} určujem {guardian}.',
    'guardian.alternate': 'Ak {guardian} nemôže funkciu vykonávať, určujem za poručníka {alternate}.',
    'guardian.instructions': 'Pokyny pre poručníka: {text}',
    'guardian.financial': 'Finančné zabezpečenie dieťaťa {child}: {text}',
    'guardian.education': 'Moje želania ohľadom vzdelania dieťaťa {child}: {text}',
    'guardian.child_unnamed': '[dieťa]',

    'instruction.recipient': 'Určené pre: {recipient}.',
    'instruction_category.funeral': 'Pohreb',
    'instruction_category.burial': 'Uloženie pozostatkov',
    'instruction_category.organ_donation': 'Darcovstvo orgánov',
    'instruction_category.pet_care': 'Starostlivosť o zvieratá',
    'instruction_category.digital_assets': 'Digitálny majetok',
    'instruction_category.business_succession': 'Nástupníctvo v podnikaní',
    'instruction_category.charitable_giving': 'Dobročinné dary',
    'instruction_category.personal_message': 'Osobný odkaz',
    'instruction_category.other': 'Ďalšie želania',

    'footer.place_date': 'V ____________________ dňa ____________________',
    'footer.signature': 'Podpis poručiteľa',
    'footer.holographic': 'Tento závet musí poručiteľ celý napísať vlastnou rukou, uviesť dátum a podpísať. '
                          'Tlačená kópia nie je platná.',
    'footer.witnessed': 'Poručiteľ závet podpísal za súčasnej prítomnosti nižšie uvedených svedkov, ktorí ho '
                        'podpísali v prítomnosti poručiteľa a navzájom.',
    'footer.notarial': 'Tento návrh bude spísaný formou notárskej zápisnice pred notárom.',
    'footer.witness': 'Svedok {number}: meno, adresa, podpis',

    'explain.declarations': 'Tieto ustanovenia určujú vašu totožnosť, odvolávajú skoršie závety a určujú rozhodné právo.',
    'explain.beneficiaries': 'Táto časť určuje, kto dedí a aký podiel každý dostane.',
    'explain.asset_distribution': 'Táto časť uvádza váš majetok a kto ho dostane. Majetok, ktorý nie je nikomu '
                                  'výslovne určený, je súčasťou zvyšku dedičstva.',
    'explain.executors': 'Správca dedičstva dbá na splnenie vašej poslednej vôle a spravuje dedičstvo.',
    'explain.guardianship': 'Súd vaše želanie ohľadom poručníka spravidla rešpektuje.',
    'explain.special_instructions': 'Tieto želania slúžia ako usmernenie pre rodinu a správcu; nemusia byť právne záväzné.',
    'explain.legal_basis': 'Právny základ: {reference}',

    'disclaimer': 'Tento dokument bol vytvorený z vami zadaných údajov a nepredstavuje právne poradenstvo. '
                  'Pred podpisom ho nechajte skontrolovať advokátom alebo notárom.',

    'exec.holographic.1': 'Odpíšte celý text závetu vlastnou rukou na papier.',
    'exec.holographic.2': 'Vlastnou rukou uveďte miesto a celý dátum (deň, mesiac, rok).',
    'exec.holographic.3': 'Závet na konci textu vlastnoručne podpíšte.',
    'exec.holographic.4': 'Originál bezpečne uschovajte a povedzte správcovi, kde sa nachádza.',
    'exec.witnessed.1': 'Vytlačte závet.',
    'exec.witnessed.2': 'Stretnite sa so všetkými svedkami súčasne.',
    'exec.witnessed.3': 'Pred svedkami závet podpíšte a potvrďte, že obsahuje vašu poslednú vôľu.',
    'exec.witnessed.4': 'Každý svedok pripojí podpis, meno, adresu a doložku, že podpisuje ako svedok.',
    'exec.witnessed.5': 'Originál bezpečne uschovajte a povedzte správcovi, kde sa nachádza.',
    'exec.notarial.1': 'Vyhľadajte notára prostredníctvom {organization} ({url}).',
    'exec.notarial.contact': 'Obráťte sa na notára v štáte {country}.',
    'exec.notarial.2': 'Objednajte sa a prineste tento návrh a platný doklad totožnosti.',
    'exec.notarial.3': 'Notár spíše závet formou notárskej zápisnice; prečítajte si ju a pred notárom podpíšte.',
    'exec.notarial.4': 'Požiadajte o zápis závetu do Notárskeho centrálneho registra závetov.',

    'req.handwritten': 'Celý závet musí poručiteľ napísať vlastnou rukou.',
    'req.signed': 'Závet musí poručiteľ podpísať.',
    'req.dated': 'Závet musí obsahovať dátum (deň, mesiac, rok).',
    'req.personal_handwriting_required': 'Text písaný na stroji, tlačený alebo nadiktovaný nie je vlastnoručným závetom.',
    'req.minors_notarial_only': 'Maloletý poručiteľ môže urobiť závet len formou notárskej zápisnice.',
    'req.identity': 'Poručiteľ musí preukázať totožnosť platným dokladom.',
    'witness.count': 'Potrební sú aspoň {count} svedkovia.',
    'witness.not_beneficiary': 'Svedkom nesmie byť dedič ani jemu blízka osoba.',
    'witness.adult': 'Svedkovia musia byť plnoletí.',
    'witness.mentally_capable': 'Svedkovia musia byť plne spôsobilí na právne úkony.',
    'witness.simultaneous_presence': 'Všetci svedkovia musia byť prítomní súčasne.',
    'warn.holographic': 'Tlačená kópia s vaším podpisom nie je platným vlastnoručným závetom.',
    'warn.witnessed': 'Ak je svedkom dedič, môže byť ohrozené jeho dedičstvo alebo celý závet.',
    'warn.notarial': 'Odmena notára je určená tarifou a závisí od hodnoty majetku.',
    'warn.notarization_required': 'V tejto jurisdikcii musí byť závet spísaný pred notárom.',
    'warn.review': 'Po významných životných udalostiach, ako je sobáš, rozvod alebo narodenie dieťaťa, závet skontrolujte.',
    'notary.costs': 'Odhadovaná odmena notára: {min} až {max}.',
}


DE: Dict[str, str] = {
    'title': 'TESTAMENT',
    'form.holographic': 'Eigenhändiges Testament: vollständig mit der Hand zu schreiben',
    'form.allographic': 'Fremdhändiges Testament: vor Zeugen zu unterschreiben',
    'form.witnessed': 'Testament vor Zeugen',
    'form.notarial': 'Notarielles Testament: zur Beurkundung durch einen Notar',
    'conjunction': 'und',

    'identity.born': 'geboren am {dob}',
    'identity.birthplace': 'in {place}',
    'identity.personal_id': 'Ausweisnummer {personal_id}',
    'identity.citizenship': 'Staatsangehörigkeit {citizenship}',
    'identity.profession': 'von Beruf {profession}',
    'identity.residing': 'wohnhaft in {address}',
    'intro': 'Ich, {name}, {identity}, erkläre hiermit meinen letzten Willen.',
    'intro@simplified': 'Ich heiße {name}, {identity}. Dies ist mein Testament.',
    'placeholder.name': '[Vor- und Nachname]',
    'placeholder.date': '[Geburtsdatum]',
    'placeholder.address': '[Anschrift]',

    'section.declarations': 'Erklärungen',
    'section.beneficiaries': 'Erben und Begünstigte',
    'section.asset_distribution': 'Verteilung des Vermögens',
    'section.executors': 'Testamentsvollstreckung',
    'section.guardianship': 'Vormundschaft für minderjährige Kinder',
    'section.special_instructions': 'Besondere Anordnungen',
    'section.execution': 'Unterschrift',

    'clause.revocation': 'Ich widerrufe alle meine bisherigen Verfügungen von Todes wegen.',
    'clause.revocation@simplified': 'Dieses Testament ersetzt alle meine früheren Testamente.',
    'clause.capacity': 'Ich errichte dieses Testament freiwillig, im Vollbesitz meiner geistigen Kräfte '
                       'und ohne Druck durch andere.',
    'clause.governing_law': 'Für dieses Testament gilt das Recht von {country}.',
    'clause.forced_heirship': 'Mir ist bekannt, dass nach dem Recht von {country} meine Abkömmlinge und andere '
                              'pflichtteilsberechtigte Angehörige einen Pflichtteil verlangen können, den dieses '
                              'Testament nicht ausschließen kann.',
    'clause.residuary.named': 'Mein gesamtes übriges Vermögen, über das ich in diesem Testament nicht anders '
                              'verfüge, erhält {names}.',
    'clause.residuary.statutory': 'Über den Teil meines Nachlasses, über den ich hier nicht verfüge, gilt die '
                                  'gesetzliche Erbfolge.',
    'clause.survivorship': 'Überlebt mich ein Begünstigter nicht, geht seine Zuwendung auf den benannten '
                           'Ersatzbegünstigten über.',
    'clause.executor_powers': 'Der Testamentsvollstrecker darf meinen Nachlass in Besitz nehmen, verwalten, '
                              'veräußern und verteilen.',
    'clause.tax': 'Erbschaftsteuer auf Zuwendungen aus diesem Testament trägt der übrige Nachlass.',
    'clause.digital_assets': 'Der Testamentsvollstrecker darf auf meine digitalen Konten und Vermögenswerte '
                             'zugreifen, sie verwalten, übertragen oder schließen.',

    'beneficiaries.intro': 'Meinen Nachlass verteile ich wie folgt:',
    'beneficiary.percentage': '{name} ({relationship}) erhält {share} meines übrigen Nachlasses.',
    'beneficiary.percentage_assets': '{name} ({relationship}) erhält {share} von {assets}.',
    'beneficiary.amount': '{name} ({relationship}) erhält einen Betrag von {amount}.',
    'beneficiary.assets': '{name} ({relationship}) erhält {assets}.',
    'beneficiary.remainder': '{name} ({relationship}) erhält den übrigen Nachlass.',
    'beneficiary.remainder_shared': '{name} ({relationship}) erhält den übrigen Nachlass zu gleichen Teilen '
                                    'mit den anderen Erben des übrigen Nachlasses.',
    'beneficiary.undefined': '{name} ({relationship}) ist als Begünstigter benannt.',
    'beneficiary.born': 'geboren am {dob}',
    'beneficiary.conditions': 'Diese Zuwendung steht unter folgender Bedingung: {conditions}.',
    'beneficiary.alternate': 'Überlebt mich {name} nicht, erhält {alternate} diese Zuwendung.',
    'relationship.spouse': 'Ehegatte',
    'relationship.child': 'Kind',
    'relationship.parent': 'Elternteil',
    'relationship.sibling': 'Geschwister',
    'relationship.grandchild': 'Enkelkind',
    'relationship.friend': 'Freund/Freundin',
    'relationship.charity': 'gemeinnützige Organisation',
    'relationship.other': 'Begünstigter',

    'assets.intro': 'Zu meinem Vermögen gehören:',
    'assets.none': 'Ich erkläre, dass ich bei Errichtung dieses Testaments kein nennenswertes Vermögen besitze.',
    'asset.value': 'geschätzter Wert {value}',
    'asset.location': 'belegen in {location}',
    'asset.ownership': 'mein Anteil von {percentage}',
    'asset.encumbrance': 'belastet mit {encumbrances}',
    'asset.to': '{asset} erhält {recipients}.',
    'asset.residuary': '{asset} gehört zum übrigen Nachlass.',
    'asset.recipient_share': '{name} ({share})',
    'asset_type.real_estate': 'Immobilie',
    'asset_type.bank_account': 'Bankkonto',
    'asset_type.investment': 'Kapitalanlage',
    'asset_type.vehicle': 'Fahrzeug',
    'asset_type.business': 'Unternehmensbeteiligung',
    'asset_type.personal_property': 'Bewegliche Sache',
    'asset_type.digital_asset': 'Digitaler Vermögenswert',
    'asset_type.other': 'Sonstiges Vermögen',

    'executor.primary': 'Zum Testamentsvollstrecker ernenne ich {name}.',
    'executor.alternate': 'Kann oder will {primary} das Amt nicht ausüben, ernenne ich {name} '
                          'zum Ersatztestamentsvollstrecker.',
    'executor.co_executor': 'Gemeinsam mit ihm ernenne ich {name} zum Mitvollstrecker.',
    'executor.unnamed': 'der Testamentsvollstrecker',
    'executor.compensation': '{name} handelt beruflich und erhält eine Vergütung: {compensation}.',
    'executor.powers': 'Befugnisse von {name}: {powers}.',
    'executor.restrictions': 'Beschränkungen von {name}: {restrictions}.',

    'guardian.appoint': 'Zum Vormund meines Kindes {child} benenne ich {guardian}.',
    'guardian.alternate': 'Kann {guardian} das Amt nicht übernehmen, benenne ich {alternate}.',
    'guardian.instructions': 'Hinweise an den Vormund: {text}',
    'guardian.financial': 'Finanzielle Versorgung von {child}: {text}',
    'guardian.education': 'Meine Wünsche zur Ausbildung von {child}: {text}',
    'guardian.child_unnamed': '[Kind]',

    'instruction.recipient': 'Bestimmt für: {recipient}.',
    'instruction_category.funeral': 'Beerdigung',
    'instruction_category.burial': 'Bestattung',
    'instruction_category.organ_donation': 'Organspende',
    'instruction_category.pet_care': 'Versorgung von Haustieren',
    'instruction_category.digital_assets': 'Digitaler Nachlass',
    'instruction_category.business_succession': 'Unternehmensnachfolge',
    'instruction_category.charitable_giving': 'Gemeinnützige Zuwendungen',
    'instruction_category.personal_message': 'Persönliche Nachricht',
    'instruction_category.other': 'Weitere Wünsche',

    'footer.place_date': 'Ort: ____________________    Datum: ____________________',
    'footer.signature': 'Unterschrift des Erblassers',
    'footer.holographic': 'Dieses Testament muss vollständig eigenhändig geschrieben, mit Ort und Datum versehen '
                          'und unterschrieben werden. Ein Ausdruck ist nicht gültig.',
    'footer.witnessed': 'Vom Erblasser in gleichzeitiger Anwesenheit der nachstehenden Zeugen unterschrieben, '
                        'die in Gegenwart des Erblassers und voneinander unterzeichnen.',
    'footer.notarial': 'Dieser Entwurf ist von einem Notar zu beurkunden.',
    'footer.witness': 'Zeuge {number}: Name, Anschrift, Unterschrift',

    'explain.declarations': 'Diese Klauseln bestimmen Ihre Identität, widerrufen frühere Testamente und legen '
                            'das anwendbare Recht fest.',
    'explain.beneficiaries': 'Dieser Teil bestimmt, wer erbt und wie viel jeder erhält.',
    'explain.asset_distribution': 'Dieser Teil führt Ihr Vermögen auf und wer es erhält. Nicht ausdrücklich '
                                  'zugewendetes Vermögen fällt in den übrigen Nachlass.',
    'explain.executors': 'Der Testamentsvollstrecker setzt Ihren letzten Willen um und verwaltet den Nachlass.',
    'explain.guardianship': 'Das Familiengericht folgt in der Regel Ihrer Benennung des Vormunds.',
    'explain.special_instructions': 'Diese Wünsche leiten Familie und Testamentsvollstrecker; sie sind nicht '
                                    'immer rechtlich bindend.',
    'explain.legal_basis': 'Rechtsgrundlage: {reference}',

    'disclaimer': 'Dieses Dokument wurde aus Ihren Angaben erstellt und ersetzt keine Rechtsberatung. '
                  'Lassen Sie es vor der Unterschrift von einem Rechtsanwalt oder Notar prüfen.',

    'exec.holographic.1': 'Schreiben Sie den gesamten Text des Testaments eigenhändig auf Papier ab.',
    'exec.holographic.2': 'Fügen Sie eigenhändig Ort und vollständiges Datum (Tag, Monat, Jahr) hinzu.',
    'exec.holographic.3': 'Unterschreiben Sie am Ende des Textes mit Vor- und Nachnamen.',
    'exec.holographic.4': 'Bewahren Sie das Original sicher auf oder geben Sie es in amtliche Verwahrung.',
    'exec.witnessed.1': 'Drucken Sie das Testament aus.',
    'exec.witnessed.2': 'Treffen Sie sich mit allen Zeugen gleichzeitig.',
    'exec.witnessed.3': 'Unterschreiben Sie vor den Zeugen und bestätigen Sie, dass es Ihren letzten Willen enthält.',
    'exec.witnessed.4': 'Jeder Zeuge unterschreibt mit Namen, Anschrift und einem Zeugenvermerk.',
    'exec.witnessed.5': 'Bewahren Sie das Original sicher auf.',
    'exec.notarial.1': 'Suchen Sie einen Notar über {organization} ({url}).',
    'exec.notarial.contact': 'Wenden Sie sich an einen Notar in {country}.',
    'exec.notarial.2': 'Vereinbaren Sie einen Termin und bringen Sie diesen Entwurf und einen gültigen Ausweis mit.',
    'exec.notarial.3': 'Der Notar beurkundet Ihr Testament; lesen Sie es und unterschreiben Sie vor dem Notar.',
    'exec.notarial.4': 'Lassen Sie das Testament im Zentralen Testamentsregister erfassen.',

    'req.handwritten': 'Das gesamte Testament muss eigenhändig geschrieben sein.',
    'req.signed': 'Das Testament muss vom Erblasser unterschrieben sein.',
    'req.dated': 'Das Testament soll Ort und Datum der Errichtung enthalten.',
    'req.personal_handwriting_required': 'Maschinen- oder computergeschriebener Text ist kein eigenhändiges Testament.',
    'req.minors_notarial_only': 'Minderjährige können ein Testament nur vor einem Notar errichten.',
    'req.identity': 'Der Erblasser muss sich mit einem gültigen Ausweis legitimieren.',
    'witness.count': 'Es sind mindestens {count} Zeugen erforderlich.',
    'witness.not_beneficiary': 'Zeugen dürfen im Testament nicht bedacht sein.',
    'witness.adult': 'Zeugen müssen volljährig sein.',
    'witness.mentally_capable': 'Zeugen müssen voll geschäftsfähig sein.',
    'witness.simultaneous_presence': 'Alle Zeugen müssen gleichzeitig anwesend sein.',
    'warn.holographic': 'Ein von Ihnen unterschriebener Ausdruck ist kein gültiges eigenhändiges Testament.',
    'warn.witnessed': 'Ist ein Begünstigter zugleich Zeuge, kann die Zuwendung oder das ganze Testament gefährdet sein.',
    'warn.notarial': 'Die Notargebühren richten sich nach dem Wert des Nachlasses.',
    'warn.notarization_required': 'In dieser Rechtsordnung muss das Testament notariell errichtet werden.',
    'warn.review': 'Überprüfen Sie Ihr Testament nach Heirat, Scheidung oder der Geburt eines Kindes.',
    'notary.costs': 'Geschätzte Notargebühren: {min} bis {max}.',
}


PHRASE_CATALOGS: Dict[str, Dict[str, str]] = {
    'en': EN,
    'cs': CS,
    'sk': SK,
    'de': DE,
}
