import pygame
from typetris_config import CONFIG

class Overlay:
    """F1 tuning panel. Edits CONFIG; the game picks the values up on its next NewGame."""
    def __init__(self):
        self.active=False
        self.items=[
            ("CELL_SIZE","Cell size",20,64,2),
            ("BOARD_WIDTH","Width",4,24,1),
            ("BOARD_HEIGHT","Height",4,32,1),
            ("FALL_INTERVAL","Fall s",0.02,2.0,0.02),
            ("SPAWN_INTERVAL","Spawn s",0.5,15.0,0.5),
            ("DRIFT_INTERVAL","Drift falls",1,40,1),
            ("DAS_MS","DAS",0,400,10),
            ("ARR_MS","ARR",0,200,5),
        ]
        self.index=0

    def toggle(self): self.active=not self.active

    def handle(self,e):
        if e.key in (pygame.K_ESCAPE,pygame.K_F1): self.toggle(); return
        if e.key==pygame.K_UP: self.index=(self.index-1)%len(self.items); return
        if e.key==pygame.K_DOWN: self.index=(self.index+1)%len(self.items); return
        key,label,lo,hi,step=self.items[self.index]
        val=CONFIG[key]
        if e.key==pygame.K_LEFT: CONFIG[key]=round(max(lo,val-step),2)
        if e.key==pygame.K_RIGHT: CONFIG[key]=round(min(hi,val+step),2)

    def draw(self,screen,font,w,h):
        if not self.active: return
        s=pygame.Surface((w-80,h-80),pygame.SRCALPHA); s.fill((20,25,40,230))
        screen.blit(s,(40,40))
        y=80
        for i,(key,label,lo,hi,step) in enumerate(self.items):
            col=(255,255,255) if i==self.index else (200,210,235)
            txt=f"{label}: {CONFIG[key]}"
            screen.blit(font.render(txt,True,col),(60,40+y)); y+=30
        hint=font.render("F2 restarts with these values",True,(165,175,215))
        screen.blit(hint,(60,40+y+10))
